"""
Ruby argument list scanning.

Just enough lexical awareness (strings, regex literals, brackets, comments)
to split ``assert_equal expected, actual # note`` into its arguments.
"""

import re
from typing import List, NamedTuple, Optional, Tuple

_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = set(_PAIRS.values())
_MODIFIER = re.compile(r"\s+(?:if|unless)\b(?!:)")


class ArgumentSyntaxError(ValueError):
  """Raised when brackets or quotes in an argument list do not balance."""


def _is_regex_start(current: str) -> bool:
  # A slash opening an argument is a regex literal, anywhere else it divides.
  return current.strip() == ""


def split_args(text: str) -> Tuple[List[str], str]:
  """
  Splits a Ruby argument list at top-level commas.

  Args:
      text: Everything after the method name, without surrounding parens.

  Returns:
      Tuple[List[str], str]: The stripped arguments and any trailing
      ``# comment`` (empty string if none).

  Raises:
      ArgumentSyntaxError: On unbalanced brackets or unterminated literals.
  """
  args: List[str] = []
  stack: List[str] = []
  current = ""
  quote: Optional[str] = None
  escaped = False
  comment = ""

  for i, ch in enumerate(text):
    if quote:
      current += ch
      if escaped:
        escaped = False
      elif ch == "\\":
        escaped = True
      elif ch == quote:
        quote = None
      continue

    if ch in "\"'" or (ch == "/" and _is_regex_start(current)):
      quote = ch
    elif ch in _PAIRS:
      stack.append(_PAIRS[ch])
    elif ch in _CLOSERS:
      if not stack or stack.pop() != ch:
        raise ArgumentSyntaxError(f"unbalanced '{ch}'")
    elif ch == "," and not stack:
      args.append(current.strip())
      current = ""
      continue
    elif ch == "#" and not stack:
      comment = text[i:].rstrip()
      break
    current += ch

  if quote:
    raise ArgumentSyntaxError(f"unterminated {quote} literal")
  if stack:
    raise ArgumentSyntaxError(f"missing '{stack[-1]}'")

  last = current.strip()
  if last or args:
    args.append(last)
  if any(a == "" for a in args):
    raise ArgumentSyntaxError("empty argument")
  return args, comment


def find_closing(text: str, open_index: int) -> int:
  """
  Index of the bracket closing the one at `open_index`.

  Raises:
      ArgumentSyntaxError: If it is never closed.
  """
  stack: List[str] = []
  quote: Optional[str] = None
  escaped = False
  for i in range(open_index, len(text)):
    ch = text[i]
    if quote:
      if escaped:
        escaped = False
      elif ch == "\\":
        escaped = True
      elif ch == quote:
        quote = None
      continue
    if ch in "\"'":
      quote = ch
    elif ch in _PAIRS:
      stack.append(_PAIRS[ch])
    elif ch in _CLOSERS:
      if not stack or stack.pop() != ch:
        raise ArgumentSyntaxError(f"unbalanced '{ch}'")
      if not stack:
        return i
  raise ArgumentSyntaxError(f"missing '{_PAIRS[text[open_index]]}'")


class LineScan(NamedTuple):
  """
  Lexical summary of one source line.

  Attributes:
      code: The line up to a trailing ``# comment``, right-stripped.
      comment: The trailing comment, or an empty string.
      depth: Brackets still open at the end of the line.
      in_literal: True if a string or regex literal is still open.
      modifier: Index in `code` of a top-level ``if``/``unless`` modifier, or -1.
  """

  code: str
  comment: str
  depth: int
  in_literal: bool
  modifier: int

  @property
  def continues(self) -> bool:
    """True if the argument list goes on past this line."""
    return not self.in_literal and (self.depth > 0 or self.code.endswith(","))


def scan_line(text: str) -> LineScan:
  """
  Scans `text` without splitting it. Never raises; unbalanced closers are
  left for `split_args` to report.
  """
  stack: List[str] = []
  quote: Optional[str] = None
  escaped = False
  start = 0
  modifier = -1
  end = len(text)

  for i, ch in enumerate(text):
    if quote:
      if escaped:
        escaped = False
      elif ch == "\\":
        escaped = True
      elif ch == quote:
        quote = None
      continue

    if ch in "\"'" or (ch == "/" and _is_regex_start(text[start:i])):
      quote = ch
    elif ch in _PAIRS:
      stack.append(_PAIRS[ch])
    elif ch in _CLOSERS:
      if stack and stack[-1] == ch:
        stack.pop()
    elif ch == "," and not stack:
      start = i + 1
    elif ch == "#":
      end = i
      break
    elif ch.isspace() and not stack and modifier < 0 and _MODIFIER.match(text, i):
      modifier = i

  return LineScan(text[:end].rstrip(), text[end:].rstrip(), len(stack), quote is not None, modifier)
