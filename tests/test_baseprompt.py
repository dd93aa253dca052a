"""Tests for the BasePrompt lifecycle."""

import pytest

import askterm.prompt.abstract.baseprompt as baseprompt_module
from askterm.choices import Choice, Separator
from askterm.prompt.abstract import BasePrompt
from askterm.prompt.dataclasses import Question
from askterm.prompt.exceptions import InvalidQuestionException
from askterm.prompt.outcomes import Pending, Ready


@pytest.fixture
def make_prompt(terminal, config, scripted_input):
    """Build a BasePrompt wired to the recording terminal."""

    def make(question):
        return BasePrompt(question, scripted_input(), terminal=terminal, config=config)

    return make


# construction


def test_defaults_accept_everything_and_keep_values(make_prompt):
    """Test missing validate/filter fall back to accept-all and identity."""
    prompt = make_prompt({"message": "Name"})

    results = []
    for value in ["", "bob", 0, None, ["a"]]:
        prompt.validate(value, results.append)
    assert results == [True] * 5

    filtered = []
    for value in ["", "bob", 0, None]:
        prompt.filter(value, filtered.append)
    assert filtered == ["", "bob", 0, None]


def test_none_validate_and_filter_use_defaults(make_prompt):
    """Test explicit None options count as not supplied."""
    prompt = make_prompt({"message": "Name", "validate": None, "filter": None})

    results = []
    prompt.validate("x", results.append)
    prompt.filter("x", results.append)
    assert results == [True, "x"]


def test_caller_options_win(make_prompt):
    """Test caller supplied validate/filter override the defaults."""
    prompt = make_prompt(
        {"message": "Name", "validate": lambda _: "nope", "filter": str.upper}
    )

    results = []
    prompt.validate("x", results.append)
    prompt.filter("x", results.append)
    assert results == ["nope", "X"]


def test_initial_state(make_prompt):
    """Test a new prompt has no height and is unanswered."""
    prompt = make_prompt({"message": "Name"})
    assert prompt.height == 0
    assert prompt.answered is False


def test_missing_message_is_not_an_error(make_prompt):
    """Test a question without a message can still be built."""
    prompt = make_prompt({})
    assert prompt.options.message is None


def test_unknown_option_raises(make_prompt):
    """Test a typo in the question options fails loudly."""
    with pytest.raises(InvalidQuestionException, match="validator"):
        make_prompt({"message": "Name", "validator": lambda _: True})


def test_caller_question_is_not_mutated(make_prompt):
    """Test the prompt works on a copy of a Question instance."""
    question = Question(message="Pick", choices=["a", "b"])
    prompt = make_prompt(question)

    assert question.choices == ["a", "b"]
    assert prompt.options.choices == [Choice("a", "a"), Choice("b", "b")]


def test_choices_replaced_by_normalized_output(make_prompt, monkeypatch):
    """Test choices are exactly what the normalizer returns for the input."""
    raw_choices = ["a", {"name": "B", "value": 2}]
    normalized = [Choice("a", "a"), Choice("B", 2)]
    seen = []

    def fake_normalize(choices):
        seen.append(choices)
        return normalized

    monkeypatch.setattr(baseprompt_module, "normalize_choices", fake_normalize)
    prompt = make_prompt({"message": "Pick", "choices": raw_choices})

    assert seen == [raw_choices]
    assert prompt.options.choices is normalized
    assert prompt.options.choices is not raw_choices


def test_choices_keep_separators(make_prompt):
    """Test separators survive normalization in place."""
    separator = Separator()
    prompt = make_prompt({"message": "Pick", "choices": ["a", separator, "b"]})
    assert prompt.options.choices[1] is separator


def test_non_sequence_choices_left_alone(make_prompt):
    """Test choices that are not a sequence are not normalized."""
    prompt = make_prompt({"message": "Pick", "choices": "abc"})
    assert prompt.options.choices == "abc"


# validate


def test_sync_validator_calls_back_before_returning(make_prompt):
    """Test a plain return value reaches the callback synchronously."""
    prompt = make_prompt({"message": "Age", "validate": lambda v: v.isdigit()})

    results = []
    prompt.validate("12", results.append)
    assert results == [True]
    prompt.validate("x", results.append)
    assert results == [True, False]


def test_ready_outcome_unwrapped(make_prompt):
    """Test Ready(value) behaves like returning value."""
    prompt = make_prompt({"message": "Age", "validate": lambda _: Ready("Too old")})

    results = []
    prompt.validate("99", results.append)
    assert results == ["Too old"]


def test_pending_validator_resolves_once(make_prompt):
    """Test a Pending outcome delivers exactly once, later resolutions ignored."""
    pending = Pending()
    prompt = make_prompt({"message": "Name", "validate": lambda _: pending})

    results = []
    prompt.validate("bob", results.append)
    assert results == []

    pending.resolve("Name is taken")
    assert results == ["Name is taken"]

    pending.resolve(True)
    assert results == ["Name is taken"]


def test_pending_resolved_during_validator(make_prompt):
    """Test a Pending resolved before it is returned still delivers."""

    def validate(_):
        pending = Pending()
        pending.resolve(True)
        return pending

    prompt = make_prompt({"message": "Name", "validate": validate})

    results = []
    prompt.validate("bob", results.append)
    assert results == [True]


def test_validator_exception_propagates(make_prompt):
    """Test errors raised by the validator are not swallowed."""

    def validate(_):
        raise ValueError("boom")

    prompt = make_prompt({"message": "Name", "validate": validate})
    with pytest.raises(ValueError, match="boom"):
        prompt.validate("x", lambda _: None)


# filter


def test_pending_filter(make_prompt):
    """Test filters can deliver their value later."""
    pendings = []

    def slow_upper(value):
        pending = Pending()
        pendings.append((pending, value))
        return pending

    prompt = make_prompt({"message": "Name", "filter": slow_upper})

    results = []
    prompt.filter("bob", results.append)
    assert results == []

    pending, value = pendings[0]
    pending.resolve(value.upper())
    pending.resolve("ignored")
    assert results == ["BOB"]


# run


def test_run_bare_prompt_calls_back_once_with_none(make_prompt):
    """Test a bare prompt completes immediately with no value."""
    prompt = make_prompt({"message": "Name"})

    results = []
    assert prompt.run(results.append) is prompt
    assert results == [None]


def test_run_filters_before_callback(terminal, config, scripted_input):
    """Test run passes the collected value through the filter."""

    class FixedPrompt(BasePrompt):
        def _run(self, callback):
            callback("  padded  ")

    prompt = FixedPrompt(
        {"message": "Name", "filter": str.strip},
        scripted_input(),
        terminal=terminal,
        config=config,
    )

    results = []
    prompt.run(results.append)
    assert results == ["padded"]


def test_run_waits_for_pending_filter(terminal, config, scripted_input):
    """Test the run callback never fires before a pending filter resolves."""
    pending = Pending()

    class FixedPrompt(BasePrompt):
        def _run(self, callback):
            callback("value")

    prompt = FixedPrompt(
        {"message": "Name", "filter": lambda _: pending},
        scripted_input(),
        terminal=terminal,
        config=config,
    )

    results = []
    prompt.run(results.append)
    assert results == []

    pending.resolve("filtered")
    assert results == ["filtered"]


def test_run_callback_fires_once_when_variant_completes_twice(
    terminal, config, scripted_input
):
    """Test a variant calling back twice still yields one answer."""

    class ChattyPrompt(BasePrompt):
        def _run(self, callback):
            callback("first")
            callback("second")

    prompt = ChattyPrompt(
        {"message": "Name"}, scripted_input(), terminal=terminal, config=config
    )

    results = []
    prompt.run(results.append)
    assert results == ["first"]


# terminal line utilities


def test_clean_erases_height_plus_extra(make_prompt, terminal):
    """Test clean(2) with height 3 erases 5 lines."""
    prompt = make_prompt({"message": "Name"})
    prompt.height = 3

    assert prompt.clean(2) is prompt
    assert terminal.count("erase_line") == 5
    assert terminal.count("cursor_up") == 4
    assert ("cursor_left", 300) in terminal.calls
    assert ("reset_attributes",) in terminal.calls


@pytest.mark.parametrize("extra", [None, "2", 1.5, True])
def test_clean_ignores_non_integer_extra(make_prompt, terminal, extra):
    """Test non-integer extra line counts are treated as zero."""
    prompt = make_prompt({"message": "Name"})
    prompt.height = 3

    prompt.clean(extra)
    assert terminal.count("erase_line") == 3


def test_clean_without_argument(make_prompt, terminal):
    """Test clean() erases exactly the prompt height."""
    prompt = make_prompt({"message": "Name"})
    prompt.height = 3

    prompt.clean()
    assert terminal.count("erase_line") == 3


def test_error_writes_marker_and_moves_up(make_prompt, terminal, config):
    """Test error() erases the line, writes the colored marker, moves up."""
    prompt = make_prompt({"message": "Name"})

    assert prompt.error("Too short") is prompt
    assert terminal.calls[:6] == [
        ("erase_line",),
        ("set_foreground", config.error_color),
        ("write", ">> "),
        ("reset_attributes",),
        ("write", "Too short"),
        ("cursor_up", 1),
    ]


@pytest.mark.parametrize("message", [None, False, ""])
def test_error_default_message(make_prompt, terminal, message):
    """Test error() falls back to the default message."""
    prompt = make_prompt({"message": "Name"})

    prompt.error(message)
    assert ("write", "Please enter a valid value") in terminal.calls


def test_prefix_and_suffix(make_prompt, config):
    """Test the question marker prefix and separator suffix."""
    prompt = make_prompt({"message": "Name"})

    assert prompt.prefix() == f"[<{config.question_color}>?</{config.question_color}>] "
    assert prompt.prefix("x").endswith("] x")
    assert prompt.suffix() == ": "
    assert prompt.suffix("x") == "x: "


def test_question_shows_default_until_answered(make_prompt):
    """Test the default hint disappears once answered."""
    prompt = make_prompt({"message": "Name", "default": "Bob"})

    assert prompt.get_question().endswith("Name: (Bob) ")

    prompt.answered = True
    assert prompt.get_question().endswith("Name: ")
    assert "(Bob)" not in prompt.get_question()


def test_question_without_default(make_prompt):
    """Test no hint is shown when there is no default."""
    prompt = make_prompt({"message": "Name"})
    assert prompt.get_question().endswith("] Name: ")
