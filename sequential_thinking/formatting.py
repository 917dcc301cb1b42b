"""Human-readable rendering of a thought record"""

from .thought import ThoughtRecord

DISABLED_MESSAGE = "Thought logging is disabled."


class ThoughtFormatter:
    def __init__(self, disable_logging: bool = False):
        self.disable_logging = disable_logging

    def format(self, record: ThoughtRecord) -> str:
        if self.disable_logging:
            return DISABLED_MESSAGE

        result = f"💭 Thought {record.thought_number}/{record.total_thoughts}\n"

        if record.is_revision and record.revises_thought is not None:
            result += f"🔄 Revising thought {record.revises_thought}\n"

        if record.branch_from_thought is not None:
            result += f"🌿 Branching from thought {record.branch_from_thought}"
            if record.branch_id:
                result += f" ({record.branch_id})"
            result += "\n"

        result += f"\n{record.thought}\n"

        if record.next_thought_needed:
            result += "\n→ More thinking needed\n"
        else:
            result += "\n✓ Thinking complete\n"

        next_needed = "true" if record.next_thought_needed else "false"
        result += (
            f"\nStatus: Thought {record.thought_number}/{record.total_thoughts}"
            f" | Next needed: {next_needed}\n"
        )
        return result
