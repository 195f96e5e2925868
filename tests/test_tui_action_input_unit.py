from trackboard.interface.tui_action_input import CHAR_LIMIT, DEFAULT_NOTE, ActionInput, InputResult


def _typed(text: str) -> ActionInput:
    action = ActionInput()
    action.start("AC-1")
    for ch in text:
        action.handle_key(ch)
    return action


def test_inactive_input_ignores_keys():
    assert ActionInput().handle_key("a") is InputResult.IGNORED


def test_typing_and_editing():
    action = _typed("flaky")
    assert action.buffer == "flaky"
    action.handle_key("backspace")
    assert action.buffer == "flak"
    action.handle_key("c-u")
    assert action.buffer == ""
    assert action.handle_key("up") is InputResult.EDITED
    assert action.buffer == ""


def test_buffer_is_capped():
    action = _typed("x" * (CHAR_LIMIT + 20))
    assert len(action.buffer) == CHAR_LIMIT


def test_submit_returns_note_and_resets():
    action = _typed("  crashes on resize  ")
    assert action.handle_key("enter") is InputResult.SUBMIT
    assert action.submit() == ("AC-1", "crashes on resize")
    assert not action.active
    assert action.buffer == ""


def test_blank_submit_uses_default_note():
    action = _typed("   ")
    assert action.submit() == ("AC-1", DEFAULT_NOTE)


def test_escape_cancels():
    action = _typed("abc")
    assert action.handle_key("escape") is InputResult.CANCEL
    action.cancel()
    assert action.target_id == ""
