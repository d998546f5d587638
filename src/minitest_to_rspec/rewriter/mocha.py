"""
Mocha -> rspec-mocks translation.

Works on one line at a time. Only applied when the run has ``--mocha``.
"""

import re

_RECEIVER = r"(?P<recv>[@$]?[A-Za-z_][\w:]*(?:\.(?!(?:expects|stubs|any_instance)\b)[A-Za-z_]\w*[?!]?)*)"
_EXPECTATION = re.compile(_RECEIVER + r"\.(?P<any>any_instance\.)?(?P<verb>expects|stubs)\((?P<msg>[^()]*)\)")

_CHAINED = [
  (re.compile(r"\.returns\("), ".and_return("),
  (re.compile(r"\.raises\("), ".and_raise("),
  (re.compile(r"\.yields\("), ".and_yield("),
  (re.compile(r"\.at_least_once\b"), ".at_least(:once)"),
  (re.compile(r"\.at_most_once\b"), ".at_most(:once)"),
]
_NEVER = re.compile(r"\.never\b(?!\?)")
_DOUBLES = [
  (re.compile(r"(?<![\w.])stub_everything\b(?:\((?P<args>[^()]*)\))?"), "double({args}).as_null_object"),
  (re.compile(r"(?<![\w.:])(?:mock|stub)\("), "double("),
]


def _double(match: "re.Match[str]", template: str) -> str:
  return template.format(args=match.group("args") or "").replace("double()", "double")


def _expectation(match: "re.Match[str]", negate: bool) -> str:
  recv = match.group("recv")
  msg = match.group("msg").strip()
  any_instance = bool(match.group("any"))
  verb = match.group("verb")

  if verb == "expects":
    wrapper = "expect_any_instance_of" if any_instance else "expect"
  else:
    wrapper = "allow_any_instance_of" if any_instance else "allow"
  to = "not_to" if negate else "to"
  if msg[:1] in (":", "'", '"'):
    matcher = f"receive({msg})"
  else:
    # stubs(name: "x", age: 3)
    matcher = f"receive_messages({msg})"
  return f"{wrapper}({recv}).{to} {matcher}"


def rewrite_mocha(line: str) -> str:
  """
  Rewrites Mocha stubs, expectations and doubles on a single line.

  Args:
      line: Source line without its indentation.

  Returns:
      str: The rewritten line, or `line` unchanged if it has no Mocha usage.
  """
  negate = bool(_NEVER.search(line)) and bool(_EXPECTATION.search(line))
  if negate:
    line = _NEVER.sub("", line)

  line = _EXPECTATION.sub(lambda m: _expectation(m, negate), line)
  for pattern, replacement in _CHAINED:
    line = pattern.sub(replacement, line)
  for pattern, template in _DOUBLES:
    if "{args}" in template:
      line = pattern.sub(lambda m, t=template: _double(m, t), line)
    else:
      line = pattern.sub(template, line)
  return line
