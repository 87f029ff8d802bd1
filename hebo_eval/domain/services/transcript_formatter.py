"""
Plain-text rendering of test cases, in the same layout as transcript files.
"""

from typing import List

from hebo_eval.domain.entities import MessageBlock, TestCase


def format_message_block_plain(block: MessageBlock) -> str:
    lines: List[str] = [f"{block.role.label}: {block.content}".strip()]

    for usage in block.tool_usages:
        lines.append(f"tool use: {usage.name} args: {usage.args}")

    for response in block.tool_responses:
        lines.append(f"tool response: {response.content}")

    return "\n".join(lines)


def format_test_case_plain(test_case: TestCase) -> str:
    """Render every message block in order, one block after another."""
    return "\n".join(format_message_block_plain(block) for block in test_case.message_blocks)
