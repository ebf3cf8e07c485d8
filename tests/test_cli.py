import pytest

from algodemos.cli import main

FAST = ["--no-serve", "--delay-scale", "0"]

HEADERS = [
    "Calling loop functions...",
    "Calling Pointer functions...",
    "Calling Functions...",
    "Calling Variables...",
    "Calling Graph...",
    "Calling Linked-list...",
    "Calling Queue...",
    "Calling Searching...",
    "Calling Sorting...",
    "Calling Stack...",
    "Calling Trees...",
    "Calling competetive problems...",
    "Calling Strings...",
    "Calling DP...",
    "Calling Concurrency...",
]


@pytest.fixture
def output(capsys):
    code = main(FAST)
    return code, capsys.readouterr().out


def test_exit_code_is_zero(output):
    code, _ = output
    assert code == 0


def test_headers_appear_in_order(output):
    _, text = output
    positions = [text.index(header) for header in HEADERS]
    assert positions == sorted(positions)


def test_server_section_skipped(output):
    _, text = output
    assert "Calling Web-Dev..." not in text
    assert "Starting server" not in text


def test_concurrency_results_printed(output):
    _, text = output
    lines = text.splitlines()
    assert "Hello from Goroutine!" in lines
    assert "Final Counter: 5" in lines
    assert sum(line.startswith("Worker ") and "finished job" in line for line in lines) == 5


def test_goroutine_messages_counted(output):
    _, text = output
    lines = text.splitlines()
    assert lines.count("Hello from main") == 3
    assert lines.count("Hello from goroutine") == 3


def test_worked_examples_printed(output):
    _, text = output
    lines = text.splitlines()
    assert "Indices: [0 1]" in lines
    assert "Rotated array: [5 6 7 1 2 3 4]" in lines
    assert "Value 40 found in the tree" in lines
    assert "Element 27 found at index 3" in lines


def test_queue_then_stack_sections(output):
    _, text = output
    queue_part = text[text.index("Calling Queue...") : text.index("Calling Searching...")]
    stack_part = text[text.index("Calling Stack...") : text.index("Calling Trees...")]
    assert "Dequeued element: 10" in queue_part
    assert "Popped element: 30" in stack_part


@pytest.mark.parametrize("bad", [["--delay-scale", "-1"], ["--delay-scale", "fast"]])
def test_invalid_delay_scale_rejected(bad):
    with pytest.raises(SystemExit) as info:
        main(["--no-serve", *bad])
    assert info.value.code == 2


@pytest.mark.parametrize("bad", [["--port", "70000"], ["--port", "http"]])
def test_invalid_port_rejected(bad):
    with pytest.raises(SystemExit) as info:
        main(["--no-serve", *bad])
    assert info.value.code == 2