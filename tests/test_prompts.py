"""Tests for the interactive prompts."""
from prompts import ask_choice, ask_text, error


def test_empty_input_is_rejected_until_a_value_is_given(answers, capsys):
    prompts = answers("", "   ", "2.0")

    assert ask_text("New version name:", empty_message="Please enter a version name") == "2.0"
    assert len(prompts) == 3
    assert capsys.readouterr().out.count(">> Please enter a version name") == 2


def test_blank_input_accepts_default(answers):
    prompts = answers("")

    assert ask_text("New version code:", default="6") == "6"
    assert prompts == ["? New version code: (6) "]


def test_answer_overrides_default(answers):
    answers(" 2.0 ")
    assert ask_text("New version name:", default="1.1") == "2.0"


def test_empty_default_behaves_like_no_default(answers):
    prompts = answers("", "1.0")
    assert ask_text("New version name:", default="") == "1.0"
    assert len(prompts) == 2


def test_choice_by_number(answers):
    answers("2")
    assert ask_choice("Pick one", ["🤖 Android", "🍎 iOS", "Both"]) == "🍎 iOS"


def test_choice_by_label(answers):
    answers("android")
    assert ask_choice("Pick one", ["🤖 Android", "🍎 iOS", "Both"]) == "🤖 Android"


def test_invalid_choice_is_asked_again(answers, capsys):
    prompts = answers("4", "", "both")

    assert ask_choice("Pick one", ["🤖 Android", "🍎 iOS", "Both"]) == "Both"
    assert len(prompts) == 3
    assert capsys.readouterr().out.count("Invalid choice") == 2


def test_error_goes_to_stderr(capsys):
    error("Something broke")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "❌ Something broke" in captured.err
