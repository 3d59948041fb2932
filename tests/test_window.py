from __future__ import annotations

from monodiff import ChangeType, Granularity, Operation, SentenceWindow, diff, window_operations
from monodiff.normalize import normalize_script
from monodiff.window import (
    reconstruct_target,
    sentence_window,
    split_sentences,
    target_offsets,
)

BASE = "Alpha one. Beta two. Gamma three. Delta four. Epsilon five."
TARGET = "Alpha one. Beta two. Gamma tres. Delta four. Epsilon five."


def _word_ops(left: str, right: str) -> tuple[Operation, ...]:
    return normalize_script(diff(left, right, Granularity.INLINE_WORD))


def test_split_sentences_by_terminators():
    spans = split_sentences("One. Two! Three?\nFour")

    assert [("One. Two! Three?\nFour")[span.start : span.end] for span in spans] == [
        "One. ",
        "Two! ",
        "Three?\n",
        "Four",
    ]


def test_split_sentences_without_match_is_whole_text():
    assert split_sentences("...") == (SentenceWindow(0, 3),)
    assert split_sentences("") == (SentenceWindow(0, 0),)


def test_removed_operations_have_no_target_width():
    operations = (
        Operation(ChangeType.UNCHANGED, "ab"),
        Operation(ChangeType.REMOVED, "xyz"),
        Operation(ChangeType.ADDED, "c"),
    )

    assert target_offsets(operations) == (
        SentenceWindow(0, 2),
        SentenceWindow(2, 2),
        SentenceWindow(2, 3),
    )


def test_window_covers_changed_sentence_and_one_neighbour_each_side():
    operations = _word_ops(BASE, TARGET)

    window = sentence_window(operations, TARGET)
    windowed = window_operations(operations, TARGET)

    assert window == SentenceWindow(11, 45)
    assert reconstruct_target(windowed) == "Beta two. Gamma tres. Delta four. "
    assert len(split_sentences(reconstruct_target(windowed))) == 3


def test_window_keeps_removed_operations_whole():
    windowed = window_operations(_word_ops(BASE, TARGET), TARGET)

    removed = [operation for operation in windowed if operation.kind is ChangeType.REMOVED]
    assert [operation.text for operation in removed] == ["three"]


def test_window_defaults_to_reconstructed_target():
    operations = _word_ops(BASE, TARGET)

    assert window_operations(operations) == window_operations(operations, TARGET)


def test_short_document_window_is_whole_document():
    left = "One fish. Two fish. Red fish."
    right = "One fish. Blue fish. Red fish."
    operations = _word_ops(left, right)

    windowed = window_operations(operations)

    assert reconstruct_target(windowed) == right


def test_changes_in_several_sentences_widen_the_window():
    left = "S1 a. S2 b. S3 c. S4 d. S5 e. S6 f. S7 g."
    right = "S1 a. S2 b. S3 X. S4 d. S5 Y. S6 f. S7 g."

    windowed = window_operations(_word_ops(left, right))

    assert reconstruct_target(windowed) == "S2 b. S3 X. S4 d. S5 Y. S6 f. "


def test_pure_deletion_is_returned_unmodified():
    operations = _word_ops("Keep this. Drop that.", "Keep this. ")

    assert not any(operation.kind is ChangeType.ADDED for operation in operations)
    assert window_operations(operations) == operations
    assert sentence_window(operations) is None


def test_empty_script_windows_to_empty():
    assert window_operations(()) == ()


def test_window_for_char_granularity_slices_unchanged_text():
    left = "First. Second. Third. Fourth. Fifth."
    right = "First. Second. Thirds. Fourth. Fifth."

    windowed = window_operations(normalize_script(diff(left, right, Granularity.INLINE_CHAR)))

    assert reconstruct_target(windowed) == "Second. Thirds. Fourth. "
    assert windowed[0].kind is ChangeType.UNCHANGED
    assert windowed[0].text.startswith("Second")


def test_change_starting_on_sentence_boundary_stays_within_three_sentences():
    left = "One. Two. Three. Four. Five. Six."
    right = "One. Two. Three. Four. Cinq. Six."

    windowed = window_operations(_word_ops(left, right))

    assert reconstruct_target(windowed) == "Four. Cinq. Six."
    assert len(split_sentences(reconstruct_target(windowed))) == 3


def test_short_document_with_change_in_last_sentence_is_whole_document():
    left = "One fish. Two fish. Red fish."
    right = "One fish. Two fish. Blue fish."

    windowed = window_operations(_word_ops(left, right))

    assert reconstruct_target(windowed) == right
