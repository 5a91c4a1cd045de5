"""Pure text transformations between the user, the file picker and the backend.

Responsibilities:
    - Splitting <think> reasoning out of model replies
    - Turning uploaded CSV text into a natural-language request

No I/O and no state: every function maps input text to output text.
"""

from cardchat.parsing.csv_prompt import count_rows, csv_to_prompt
from cardchat.parsing.reply_parser import parse_reply

__all__ = ["count_rows", "csv_to_prompt", "parse_reply"]
