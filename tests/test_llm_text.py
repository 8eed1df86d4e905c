from interview_practice.models import GradeResult
from interview_practice.utils.llm_text import parse_grade, parse_questions


def test_numbered_list_is_stripped_in_order():
    text = "1. Tell me about yourself\n2. Why this role?"
    assert parse_questions(text) == ("Tell me about yourself", "Why this role?")


def test_blank_lines_and_padding_are_dropped():
    text = "\n\n  1.   Describe a conflict (behavioral)  \n\n\n10. Design a cache (technical)\n"
    assert parse_questions(text) == (
        "Describe a conflict (behavioral)",
        "Design a cache (technical)",
    )


def test_unnumbered_lines_are_kept_as_is():
    assert parse_questions("What is a closure?\nWhy Python?") == (
        "What is a closure?",
        "Why Python?",
    )


def test_count_is_not_enforced():
    text = "\n".join(f"{i}. Q{i}" for i in range(1, 13))
    assert len(parse_questions(text)) == 12


def test_empty_and_whitespace_give_no_questions():
    assert parse_questions("") == ()
    assert parse_questions("   \n\n  ") == ()
    assert parse_questions(None) == ()


def test_only_the_leading_ordinal_is_removed():
    assert parse_questions("2. Walk me through step 3. of your plan") == (
        "Walk me through step 3. of your plan",
    )


def test_grade_with_score_and_feedback():
    assert parse_grade("8\nSolid answer with clear structure.") == GradeResult(
        score=8, feedback="Solid answer with clear structure."
    )


def test_grade_feedback_lines_joined_with_single_space():
    text = "Score: 7/10\n\nGood example.\n- Add metrics\n- Be concise\n- Name the outcome"
    result = parse_grade(text)
    assert result.score == 7
    assert result.feedback == (
        "Good example. - Add metrics - Be concise - Name the outcome"
    )


def test_grade_without_digit_on_first_line_defaults_to_zero():
    assert parse_grade("Great job overall") == GradeResult(score=0, feedback="")


def test_grade_on_empty_text():
    assert parse_grade("") == GradeResult(score=0, feedback="")
    assert parse_grade("  \n \n") == GradeResult(score=0, feedback="")
    assert parse_grade(None) == GradeResult(score=0, feedback="")


def test_grade_digits_after_first_line_do_not_count():
    assert parse_grade("Well done\n9").score == 0


def test_out_of_range_score_passes_through():
    assert parse_grade("42\nok").score == 42


def test_overlong_digit_run_degrades_to_zero():
    result = parse_grade("9" * 5000 + "\nok")
    assert result == GradeResult(score=0, feedback="ok")
