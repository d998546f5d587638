"""
Line-oriented Minitest -> RSpec rewriter.

The rewriter walks the source one line at a time. It recognizes:

- helper requires (``test_helper`` -> ``spec_helper`` / ``rails_helper``),
- test case classes (``class FooTest < Minitest::Test`` -> ``RSpec.describe Foo``),
- test definitions (``test "x" do`` and ``def test_x``) -> ``it``,
- ``setup``/``teardown`` hooks -> ``before``/``after``,
- assertions -> ``expect(...)`` (see `assertions.py`),
- ``assert_raises`` blocks -> ``expect do ... end.to raise_error``,
- Mocha usage -> rspec-mocks (see `mocha.py`), when enabled.

Lines it does not recognize are copied through unchanged.
"""

import re
from typing import List, NamedTuple, Optional, Tuple

from minitest_to_rspec.config import ConversionConfig
from minitest_to_rspec.core.errors import ContentConversionError
from minitest_to_rspec.rewriter.args import find_closing, scan_line, split_args
from minitest_to_rspec.rewriter.assertions import ASSERTIONS, RAISES_ASSERTIONS, build_expectation
from minitest_to_rspec.rewriter.mocha import rewrite_mocha

# Base class -> rspec-rails :type metadatum (None: plain Ruby test case)
TEST_CASE_TYPES = {
  "Minitest::Test": None,
  "MiniTest::Test": None,
  "Minitest::Unit::TestCase": None,
  "MiniTest::Unit::TestCase": None,
  "Test::Unit::TestCase": None,
  "ActiveSupport::TestCase": "model",
  "ActionController::TestCase": "controller",
  "ActionDispatch::IntegrationTest": "request",
  "ActionMailer::TestCase": "mailer",
  "ActionView::TestCase": "helper",
  "ActiveJob::TestCase": "job",
}

_REQUIRE_HELPER = re.compile(r"""^require\s*\(?\s*(['"])test_helper\1\s*\)?\s*(?P<comment>#.*)?$""")
_REQUIRE_AUTORUN = re.compile(r"""^require\s*\(?\s*(['"])minitest/autorun\1\s*\)?\s*$""")
_REQUIRE_MOCHA = re.compile(r"""^require\s*\(?\s*(['"])mocha(/\w+)*\1\s*\)?\s*$""")
_CLASS = re.compile(r"^class\s+(?P<name>[A-Z][\w:]*)\s*<\s*(?P<base>[\w:]+)\s*(?P<comment>#.*)?$")
_TEST_BLOCK = re.compile(r"^test\s*\(?\s*(?P<desc>(['\"]).*\2)\s*\)?\s+do\s*(?P<args>\|[^|]*\|)?\s*$")
_TEST_METHOD = re.compile(r"^def\s+test_(?P<name>\w+[?!]?)\s*(\(\s*\))?\s*$")
_HOOK_BLOCK = re.compile(r"^(?P<hook>setup|teardown)\s+do\s*$")
_HOOK_METHOD = re.compile(r"^def\s+(?P<hook>setup|teardown)\s*(\(\s*\))?\s*$")
_ASSERTION = re.compile(r"^(?P<name>(?:assert|refute)(?:_\w+)?)(?P<rest>(?:\(|\s).*)?$")
_END = re.compile(r"^end\s*(?P<comment>#.*)?$")

_HOOKS = {"setup": "before", "teardown": "after"}


class _PendingRaise(NamedTuple):
  indent: str
  matcher: str
  line_number: int


class MinitestConverter:
  """
  Converts the text of one Minitest file into RSpec.

  Attributes:
      config (ConversionConfig): Feature flags of the run.
      source_path (str): Used in error messages only.
  """

  def __init__(self, config: ConversionConfig, source_path: str = "(string)"):
    self.config = config
    self.source_path = source_path
    self._pending_raises: List[_PendingRaise] = []
    self._helper_required = False
    self._line_number = 0
    self._indent = ""

  @property
  def helper(self) -> str:
    return "rails_helper" if self.config.use_rails else "spec_helper"

  def convert(self, text: str) -> str:
    """
    Rewrites `text`.

    Args:
        text: Full Minitest source.

    Returns:
        str: RSpec source. A trailing newline is kept if present.

    Raises:
        ContentConversionError: If a construct cannot be parsed.
    """
    out: List[str] = []
    lines = text.splitlines()
    index = 0
    while index < len(lines):
      self._line_number = index + 1
      line, index = self._logical_line(lines, index)
      converted = self._convert_line(line)
      if converted is not None:
        out.append(converted)

    if self._pending_raises:
      pending = self._pending_raises[-1]
      raise self._error("unterminated assert_raises block", pending.line_number)

    result = "\n".join(out)
    if text.endswith("\n"):
      result += "\n"
    return result

  def _error(self, message: str, line_number: Optional[int] = None) -> ContentConversionError:
    return ContentConversionError(f"{self.source_path}:{line_number or self._line_number}: {message}")

  def _logical_line(self, lines: List[str], index: int) -> Tuple[str, int]:
    """
    Joins an assertion whose arguments span several lines into one line.

    Args:
        lines: All source lines.
        index: Position of the line to start from.

    Returns:
        Tuple[str, int]: The (possibly joined) line and the index of the next
        unread line. An argument list still open at the end of the file is
        returned unjoined so the assertion parser reports it.
    """
    line = lines[index]
    m = _ASSERTION.match(line.strip())
    if not m or m.group("name") not in ASSERTIONS:
      return line, index + 1
    scan = scan_line(m.group("rest") or "")
    if not scan.continues:
      return line, index + 1

    indent = line[: len(line) - len(line.lstrip())]
    parts = [scan.code]
    comments = [scan.comment] if scan.comment else []
    end = index + 1
    while scan.continues:
      if end == len(lines):
        return line, index + 1
      piece = scan_line(lines[end])
      parts.append(piece.code.strip())
      if piece.comment:
        comments.append(piece.comment)
      end += 1
      scan = scan_line(" ".join(parts))

    joined = m.group("name") + " ".join(p for p in parts if p)
    if comments:
      joined += " " + " ".join(comments)
    return f"{indent}{joined}", end

  def _convert_line(self, line: str) -> Optional[str]:
    """Returns the rewritten line, or None to drop it."""
    body = line.strip()
    indent = line[: len(line) - len(line.lstrip())]
    self._indent = indent
    if not body or body.startswith("#"):
      return line

    if _REQUIRE_HELPER.match(body) or _REQUIRE_AUTORUN.match(body):
      if self._helper_required:
        return None
      self._helper_required = True
      return f"{indent}require '{self.helper}'"
    if _REQUIRE_MOCHA.match(body):
      return None if self.config.use_mocha else line

    m = _END.match(body)
    if m and self._pending_raises and self._pending_raises[-1].indent == indent:
      pending = self._pending_raises.pop()
      return f"{indent}end.to {pending.matcher}" + (f" {m.group('comment')}" if m.group("comment") else "")

    rewritten = self._convert_statement(body)
    if rewritten is None:
      rewritten = body
    if self.config.use_mocha:
      rewritten = rewrite_mocha(rewritten)
    if rewritten == body:
      return line
    return f"{indent}{rewritten}"

  def _convert_statement(self, body: str) -> Optional[str]:
    m = _CLASS.match(body)
    if m and m.group("base") in TEST_CASE_TYPES:
      return self._describe(m.group("name"), m.group("base"), m.group("comment"))

    m = _TEST_BLOCK.match(body)
    if m:
      args = f" {m.group('args')}" if m.group("args") else ""
      return f"it {m.group('desc')} do{args}"

    m = _TEST_METHOD.match(body)
    if m:
      description = m.group("name").replace("_", " ")
      return f'it "{description}" do'

    m = _HOOK_BLOCK.match(body) or _HOOK_METHOD.match(body)
    if m:
      return f"{_HOOKS[m.group('hook')]} do"

    m = _ASSERTION.match(body)
    if m:
      return self._assertion(m.group("name"), m.group("rest") or "")
    return None

  def _describe(self, name: str, base: str, comment: Optional[str]) -> str:
    described = name[: -len("Test")] if name.endswith("Test") and name != "Test" else name
    metadata = ""
    kind = TEST_CASE_TYPES[base]
    if self.config.use_rails and kind:
      metadata = f", type: :{kind}"
    suffix = f" {comment}" if comment else ""
    return f"RSpec.describe {described}{metadata} do{suffix}"

  def _assertion(self, name: str, rest: str) -> Optional[str]:
    if name not in ASSERTIONS and name not in RAISES_ASSERTIONS:
      return None
    try:
      if name in RAISES_ASSERTIONS:
        return self._raises(rest)

      modifier = ""
      if rest.startswith("("):
        close = find_closing(rest, 0)
        tail = scan_line(rest[close + 1 :])
        if tail.code.strip() and tail.modifier != 0:
          # e.g. `assert(x) && y`: not a plain call, leave it alone.
          return None
        args, comment = split_args(rest[1:close])
        modifier = tail.code.strip()
        comment = comment or tail.comment
      else:
        scan = scan_line(rest)
        if scan.modifier >= 0:
          # `assert_equal 1, x if y`: the modifier guards the whole expectation.
          modifier = scan.code[scan.modifier :].strip()
          rest = scan.code[: scan.modifier] + (f" {scan.comment}" if scan.comment else "")
        args, comment = split_args(rest)

      expectation = build_expectation(name, args)
    except ValueError as e:
      raise self._error(f"cannot convert {name}: {e}") from e

    if expectation is None:
      return None
    if modifier:
      expectation = f"{expectation} {modifier}"
    return f"{expectation} {comment}" if comment else expectation

  def _raises(self, rest: str) -> str:
    """Handles ``assert_raises(E) do`` and ``assert_raises(E) { ... }``."""
    rest = rest.strip()
    block_match = re.match(r"^(?P<args>.*?)\s*\{(?P<block>.*)\}\s*$", rest)
    if block_match and not rest.endswith(" do"):
      args, _ = split_args(_strip_parens(block_match.group("args")))
      matcher = _raise_error(args)
      return f"expect {{{block_match.group('block')}}}.to {matcher}"

    do_match = re.match(r"^(?P<args>.*?)\s*do(?:\s*\|[^|]*\|)?$", rest)
    if not do_match:
      raise ValueError("expected a block")
    args, _ = split_args(_strip_parens(do_match.group("args")))
    self._pending_raises.append(_PendingRaise(self._indent, _raise_error(args), self._line_number))
    return "expect do"


def _strip_parens(text: str) -> str:
  text = text.strip()
  if text.startswith("(") and find_closing(text, 0) == len(text) - 1:
    return text[1:-1]
  return text


def _raise_error(args: List[str]) -> str:
  # assert_raises(ErrorClass, "optional message")
  if not args:
    return "raise_error"
  return f"raise_error({args[0]})"


def convert(text: str, source_path_hint: str, config: ConversionConfig) -> str:
  """
  Converter entry point: ``(text, source_path_hint, config) -> str``.
  """
  return MinitestConverter(config, source_path_hint).convert(text)
