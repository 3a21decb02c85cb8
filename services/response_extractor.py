from __future__ import annotations

import re

# First ``` fence, optional language tag, lazily up to the next closing fence.
_FENCED_BLOCK = re.compile(r"```[\w+-]*\s*(.*?)```", re.DOTALL)


def extract(raw_text: str) -> str:
    """Return the JSON candidate text from a completion.

    Models often wrap their answer in a markdown code fence. When a fence is
    present the content of the first one is returned; otherwise the trimmed
    text is handed through unchanged. Prose around an unfenced array is not
    searched.
    """
    text = raw_text.strip()
    match = _FENCED_BLOCK.search(text)
    if match:
        return match.group(1).strip()
    return text
