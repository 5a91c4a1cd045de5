"""Splits a model reply into its reasoning trace and its conclusion.

Reasoning models wrap their deliberation in a <think>...</think> block ahead
of the answer. Only the conclusion is meant for the user.
"""

import re

from cardchat.models.schemas import ParsedReply

THINK_PATTERN = re.compile(r"<think>(.*?)</think>", re.DOTALL)


def parse_reply(raw: str) -> ParsedReply:
    """Extract the first reasoning block from a raw reply.

    Args:
        raw: Reply text as received from the backend.

    Returns:
        ParsedReply with the trimmed reasoning and the remaining text.
        Without a complete block the reply is returned untouched as the
        conclusion, including any unterminated <think> marker.
    """
    match = THINK_PATTERN.search(raw)
    if match is None:
        return ParsedReply(reasoning="", conclusion=raw)

    conclusion = raw[: match.start()] + raw[match.end() :]
    return ParsedReply(
        reasoning=match.group(1).strip(),
        conclusion=conclusion.strip(),
    )
