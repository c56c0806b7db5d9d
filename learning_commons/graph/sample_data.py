"""
Sample Common Core math learning components (grades 3-4).

These mirror the Learning Commons data model and stand in for the published
LearningComponent/Relationships CSV exports.
"""
from __future__ import annotations

from learning_commons.graph.models import (
    LearningComponent,
    SkillType,
    StandardsFramework,
    Subject,
)

NBT = "Number and Operations in Base Ten"
OA = "Operations and Algebraic Thinking"
NF = "Number and Operations - Fractions"

CCSS_MATH_FRAMEWORK = StandardsFramework(
    uuid="fw-ccss-math",
    identifier="CCSS.MATH",
    title="Common Core State Standards for Mathematics",
    description="College and Career Readiness Standards for Mathematics",
    subject=Subject.MATH,
    publisher="National Governors Association",
    version="2010",
)


def _math(
    uuid: str,
    identifier: str,
    label: str,
    description: str,
    grade: str,
    domain: str,
    cluster: str,
    skill_type: SkillType,
    prerequisites: tuple[str, ...],
    standard: str,
) -> LearningComponent:
    return LearningComponent(
        uuid=uuid,
        identifier=identifier,
        label=label,
        description=description,
        subject=Subject.MATH,
        grade_levels=(grade,),
        domain=domain,
        cluster=cluster,
        skill_type=skill_type,
        prerequisites=prerequisites,
        related_standards=(standard,),
    )


SAMPLE_MATH_COMPONENTS: tuple[LearningComponent, ...] = (
    # Place value
    _math("lc-pv-001", "LC.MATH.PV.3.1", "Place Value to Thousands",
          "Understand that digits in each place represent amounts of thousands, hundreds, tens, and ones",
          "3", NBT, "Place Value", SkillType.CONCEPTUAL, (), "3.NBT.A.1"),
    _math("lc-pv-002", "LC.MATH.PV.3.2", "Read and Write Numbers to 1000",
          "Read and write whole numbers up to 1000 using base-ten numerals, number names, and expanded form",
          "3", NBT, "Place Value", SkillType.PROCEDURAL, ("lc-pv-001",), "3.NBT.A.1"),
    _math("lc-pv-003", "LC.MATH.PV.3.3", "Compare Multi-digit Numbers",
          "Compare two multi-digit numbers based on meanings of the digits using >, =, and < symbols",
          "3", NBT, "Place Value", SkillType.APPLICATION, ("lc-pv-001", "lc-pv-002"), "3.NBT.A.1"),
    # Addition
    _math("lc-add-001", "LC.MATH.ADD.3.1", "Addition Facts Fluency",
          "Fluently add within 20 using mental strategies",
          "3", OA, "Addition", SkillType.PROCEDURAL, (), "3.OA.C.7"),
    _math("lc-add-002", "LC.MATH.ADD.3.2", "Add Within 1000 Without Regrouping",
          "Add multi-digit whole numbers within 1000 when no regrouping is required",
          "3", NBT, "Addition", SkillType.PROCEDURAL, ("lc-add-001", "lc-pv-001"), "3.NBT.A.2"),
    _math("lc-add-003", "LC.MATH.ADD.3.3", "Add Within 1000 With Regrouping",
          "Add multi-digit whole numbers within 1000 using place value strategies including regrouping",
          "3", NBT, "Addition", SkillType.PROCEDURAL, ("lc-add-002", "lc-pv-001"), "3.NBT.A.2"),
    # Subtraction
    _math("lc-sub-001", "LC.MATH.SUB.3.1", "Subtraction Facts Fluency",
          "Fluently subtract within 20 using mental strategies",
          "3", OA, "Subtraction", SkillType.PROCEDURAL, ("lc-add-001",), "3.OA.C.7"),
    _math("lc-sub-002", "LC.MATH.SUB.3.2", "Subtract Within 1000 Without Regrouping",
          "Subtract multi-digit whole numbers within 1000 when no regrouping is required",
          "3", NBT, "Subtraction", SkillType.PROCEDURAL, ("lc-sub-001", "lc-pv-001"), "3.NBT.A.2"),
    _math("lc-sub-003", "LC.MATH.SUB.3.3", "Subtract Within 1000 With Regrouping",
          "Subtract multi-digit whole numbers within 1000 using place value strategies including regrouping",
          "3", NBT, "Subtraction", SkillType.PROCEDURAL, ("lc-sub-002",), "3.NBT.A.2"),
    # Multiplication
    _math("lc-mult-001", "LC.MATH.MULT.3.1", "Multiplication as Equal Groups",
          "Interpret products of whole numbers as the total number of objects in equal groups",
          "3", OA, "Multiplication", SkillType.CONCEPTUAL, ("lc-add-001",), "3.OA.A.1"),
    _math("lc-mult-002", "LC.MATH.MULT.3.2", "Multiplication as Arrays",
          "Interpret products using rectangular arrays with rows and columns",
          "3", OA, "Multiplication", SkillType.CONCEPTUAL, ("lc-mult-001",), "3.OA.A.1"),
    _math("lc-mult-003", "LC.MATH.MULT.3.3", "Multiplication Facts to 10",
          "Know from memory all products of two one-digit numbers",
          "3", OA, "Multiplication", SkillType.PROCEDURAL, ("lc-mult-001", "lc-mult-002"), "3.OA.C.7"),
    _math("lc-mult-004", "LC.MATH.MULT.3.4", "Commutative Property of Multiplication",
          "Apply properties of operations: if 6 × 4 = 24 then 4 × 6 = 24",
          "3", OA, "Multiplication", SkillType.CONCEPTUAL, ("lc-mult-003",), "3.OA.B.5"),
    # Division
    _math("lc-div-001", "LC.MATH.DIV.3.1", "Division as Equal Sharing",
          "Interpret quotients as the number of objects in each group when dividing equally",
          "3", OA, "Division", SkillType.CONCEPTUAL, ("lc-mult-001",), "3.OA.A.2"),
    _math("lc-div-002", "LC.MATH.DIV.3.2", "Division as Equal Groups",
          "Interpret quotients as the number of groups when dividing into groups of a known size",
          "3", OA, "Division", SkillType.CONCEPTUAL, ("lc-div-001",), "3.OA.A.2"),
    _math("lc-div-003", "LC.MATH.DIV.3.3", "Division Facts from Multiplication",
          "Use multiplication facts to find related division facts",
          "3", OA, "Division", SkillType.PROCEDURAL, ("lc-mult-003", "lc-div-001"), "3.OA.C.7"),
    # Fractions
    _math("lc-frac-001", "LC.MATH.FRAC.3.1", "Unit Fractions",
          "Understand a fraction 1/b as one part when a whole is partitioned into b equal parts",
          "3", NF, "Fractions", SkillType.CONCEPTUAL, ("lc-div-001",), "3.NF.A.1"),
    _math("lc-frac-002", "LC.MATH.FRAC.3.2", "Non-Unit Fractions",
          "Understand a fraction a/b as a parts of size 1/b",
          "3", NF, "Fractions", SkillType.CONCEPTUAL, ("lc-frac-001",), "3.NF.A.1"),
    _math("lc-frac-003", "LC.MATH.FRAC.3.3", "Fractions on a Number Line",
          "Represent fractions on a number line diagram",
          "3", NF, "Fractions", SkillType.PROCEDURAL, ("lc-frac-001", "lc-frac-002"), "3.NF.A.2"),
    _math("lc-frac-004", "LC.MATH.FRAC.3.4", "Equivalent Fractions",
          "Explain equivalence of fractions and compare fractions by reasoning about their size",
          "3", NF, "Fractions", SkillType.CONCEPTUAL, ("lc-frac-002", "lc-frac-003"), "3.NF.A.3"),
    # Grade 4
    _math("lc-mult-4-001", "LC.MATH.MULT.4.1", "Multiply by 10s and 100s",
          "Multiply a whole number of up to four digits by a one-digit whole number using place value",
          "4", NBT, "Multiplication", SkillType.PROCEDURAL, ("lc-mult-003", "lc-pv-001"), "4.NBT.B.5"),
    _math("lc-mult-4-002", "LC.MATH.MULT.4.2", "Multi-digit Multiplication",
          "Multiply a whole number of up to four digits by a one-digit number using strategies based on place value",
          "4", NBT, "Multiplication", SkillType.PROCEDURAL, ("lc-mult-4-001",), "4.NBT.B.5"),
)
