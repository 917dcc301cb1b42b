from sequential_thinking.formatting import DISABLED_MESSAGE, ThoughtFormatter
from sequential_thinking.thought import ThoughtRecord


def _record(**overrides):
    fields = {
        "thought": "This is a test thought",
        "thought_number": 1,
        "total_thoughts": 3,
        "next_thought_needed": True,
    }
    fields.update(overrides)
    return ThoughtRecord(**fields)


def test_basic_thought():
    output = ThoughtFormatter().format(_record())

    assert output == (
        "💭 Thought 1/3\n"
        "\n"
        "This is a test thought\n"
        "\n"
        "→ More thinking needed\n"
        "\n"
        "Status: Thought 1/3 | Next needed: true\n"
    )


def test_final_thought():
    output = ThoughtFormatter().format(
        _record(thought_number=3, next_thought_needed=False)
    )

    assert "💭 Thought 3/3" in output
    assert "✓ Thinking complete" in output
    assert "More thinking needed" not in output
    assert "Status: Thought 3/3 | Next needed: false" in output


def test_revision_line():
    output = ThoughtFormatter().format(
        _record(thought_number=2, is_revision=True, revises_thought=1)
    )

    assert "🔄 Revising thought 1\n" in output
    assert output.index("Revising") < output.index("This is a test thought")


def test_revision_needs_both_fields():
    formatter = ThoughtFormatter()

    assert "Revising" not in formatter.format(_record(is_revision=True))
    assert "Revising" not in formatter.format(_record(is_revision=False, revises_thought=1))


def test_branch_with_id():
    output = ThoughtFormatter().format(
        _record(thought_number=2, branch_from_thought=1, branch_id="branch-a")
    )

    assert "🌿 Branching from thought 1 (branch-a)\n" in output


def test_branch_without_id():
    formatter = ThoughtFormatter()

    for record in (_record(branch_from_thought=1), _record(branch_from_thought=1, branch_id="")):
        output = formatter.format(record)
        assert "🌿 Branching from thought 1\n" in output
        assert "()" not in output


def test_revision_precedes_branch():
    output = ThoughtFormatter().format(
        _record(thought_number=2, is_revision=True, revises_thought=1, branch_from_thought=1)
    )

    assert output.index("Revising") < output.index("Branching")


def test_disabled_returns_constant():
    formatter = ThoughtFormatter(disable_logging=True)

    assert formatter.format(_record()) == DISABLED_MESSAGE
    assert formatter.format(_record(thought="other", branch_from_thought=1)) == DISABLED_MESSAGE
    assert DISABLED_MESSAGE == "Thought logging is disabled."


def test_formatting_is_deterministic():
    formatter = ThoughtFormatter()
    record = _record(is_revision=True, revises_thought=1, branch_from_thought=1, branch_id="b")

    assert formatter.format(record) == formatter.format(record)
