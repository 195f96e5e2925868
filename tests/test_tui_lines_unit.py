from trackboard.interface.tui_lines import criterion_line_counts, criterion_lines, document_lines, task_line
from trackboard.status import CriterionStatus, TaskStatus
from trackboard.viewmodels import CriterionItem, TaskRow
from util.display import display_width


def _texts(lines):
    return ["".join(text for _, text in line) for line in lines]


def test_collapsed_criterion_is_one_line():
    item = CriterionItem("AC-1", "short", testing_instructions="do it")
    assert len(criterion_lines(item, 60)) == 1


def test_expanded_criterion_adds_label_and_instructions():
    item = CriterionItem("AC-1", "short", testing_instructions="first\n\nsecond", expanded=True)
    texts = _texts(criterion_lines(item, 60))
    assert texts[1].strip() == "Testing Instructions:"
    assert [t.strip() for t in texts[2:]] == ["first", "second"]


def test_long_header_wraps_within_width():
    item = CriterionItem("AC-1", "word " * 40)
    lines = criterion_lines(item, 30)
    assert len(lines) > 1
    assert all(display_width(text) <= 30 for text in _texts(lines))


def test_notes_hidden_once_verified():
    failed = CriterionItem("AC-1", "x", CriterionStatus.FAILED, notes="why")
    verified = CriterionItem("AC-2", "x", CriterionStatus.VERIFIED, notes="why")
    skipped = CriterionItem("AC-3", "x", CriterionStatus.SKIPPED, notes="later")
    assert "Failure Reason: why" in _texts(criterion_lines(failed, 60))[1]
    assert len(criterion_lines(verified, 60)) == 1
    assert "Notes: later" in _texts(criterion_lines(skipped, 60))[1]


def test_line_counts_follow_expansion_and_width():
    items = [CriterionItem("AC-1", "a", testing_instructions="x " * 50), CriterionItem("AC-2", "b")]
    assert criterion_line_counts(items, 60) == [1, 1]
    items[0].expanded = True
    wide = criterion_line_counts(items, 100)
    narrow = criterion_line_counts(items, 30)
    assert wide[0] > 1
    assert narrow[0] > wide[0]
    assert wide[1] == narrow[1] == 1


def test_task_line_trims_to_width():
    line = task_line(TaskRow("T-1", "t" * 200, TaskStatus.DONE), 40)
    assert display_width("".join(text for _, text in line)) <= 40
    assert line[-1] == ("class:status.ok", "[DONE]")


def test_document_lines_placeholder():
    assert document_lines("", 40) == ["(empty document)"]
    assert document_lines("a\n\nb\n", 40) == ["a", "", "b"]
