"""
Minitest assertion -> RSpec expectation mappings.

Each entry describes the positional arguments an assertion takes (an
optional trailing failure message is always allowed) and how to build the
equivalent expectation from them.
"""

from typing import Callable, Dict, List, NamedTuple, Optional


class AssertionRule(NamedTuple):
  arity: int
  build: Callable[[List[str]], str]
  optional: int = 0


def _expect(actual: str, matcher: str, negate: bool = False) -> str:
  verb = "not_to" if negate else "to"
  return f"expect({actual}).{verb} {matcher}"


def _predicate(args: List[str]) -> str:
  name = args[1].lstrip(":").rstrip("?")
  return f"be_{name}"


def _operator(args: List[str], negate: bool) -> str:
  op = args[1].lstrip(":")
  if len(args) == 2:
    # assert_operator x, :positive? style predicates
    return _expect(args[0], f"be_{op.rstrip('?')}", negate)
  return _expect(args[0], f"be {op} {args[2]}", negate)


def _within(args: List[str], negate: bool) -> str:
  delta = args[2] if len(args) > 2 else "0.001"
  return _expect(args[1], f"be_within({delta}).of({args[0]})", negate)


ASSERTIONS: Dict[str, AssertionRule] = {
  "assert": AssertionRule(1, lambda a: _expect(a[0], "be_truthy")),
  "refute": AssertionRule(1, lambda a: _expect(a[0], "be_falsey")),
  "assert_equal": AssertionRule(2, lambda a: _expect(a[1], f"eq({a[0]})")),
  "refute_equal": AssertionRule(2, lambda a: _expect(a[1], f"eq({a[0]})", True)),
  "assert_nil": AssertionRule(1, lambda a: _expect(a[0], "be_nil")),
  "refute_nil": AssertionRule(1, lambda a: _expect(a[0], "be_nil", True)),
  "assert_empty": AssertionRule(1, lambda a: _expect(a[0], "be_empty")),
  "refute_empty": AssertionRule(1, lambda a: _expect(a[0], "be_empty", True)),
  "assert_includes": AssertionRule(2, lambda a: _expect(a[0], f"include({a[1]})")),
  "refute_includes": AssertionRule(2, lambda a: _expect(a[0], f"include({a[1]})", True)),
  "assert_instance_of": AssertionRule(2, lambda a: _expect(a[1], f"be_an_instance_of({a[0]})")),
  "refute_instance_of": AssertionRule(2, lambda a: _expect(a[1], f"be_an_instance_of({a[0]})", True)),
  "assert_kind_of": AssertionRule(2, lambda a: _expect(a[1], f"be_a_kind_of({a[0]})")),
  "refute_kind_of": AssertionRule(2, lambda a: _expect(a[1], f"be_a_kind_of({a[0]})", True)),
  "assert_match": AssertionRule(2, lambda a: _expect(a[1], f"match({a[0]})")),
  "refute_match": AssertionRule(2, lambda a: _expect(a[1], f"match({a[0]})", True)),
  "assert_same": AssertionRule(2, lambda a: _expect(a[1], f"be({a[0]})")),
  "refute_same": AssertionRule(2, lambda a: _expect(a[1], f"be({a[0]})", True)),
  "assert_respond_to": AssertionRule(2, lambda a: _expect(a[0], f"respond_to({a[1]})")),
  "refute_respond_to": AssertionRule(2, lambda a: _expect(a[0], f"respond_to({a[1]})", True)),
  "assert_predicate": AssertionRule(2, lambda a: _expect(a[0], _predicate(a))),
  "refute_predicate": AssertionRule(2, lambda a: _expect(a[0], _predicate(a), True)),
  "assert_operator": AssertionRule(2, lambda a: _operator(a, False), optional=1),
  "refute_operator": AssertionRule(2, lambda a: _operator(a, True), optional=1),
  "assert_in_delta": AssertionRule(2, lambda a: _within(a, False), optional=1),
  "refute_in_delta": AssertionRule(2, lambda a: _within(a, True), optional=1),
}

RAISES_ASSERTIONS = ("assert_raises", "assert_raise")


def build_expectation(name: str, args: List[str]) -> Optional[str]:
  """
  Converts one assertion call.

  Args:
      name: Assertion method name, e.g. ``assert_equal``.
      args: Its already split arguments.

  Returns:
      Optional[str]: The expectation, or None if `name` is not a known assertion.

  Raises:
      ValueError: If the argument count does not fit the assertion.
  """
  rule = ASSERTIONS.get(name)
  if rule is None:
    return None

  lowest = rule.arity
  highest = rule.arity + rule.optional + 1
  if not lowest <= len(args) <= highest:
    raise ValueError(f"{name} expects {lowest} argument(s), got {len(args)}")

  positional = args[: rule.arity + rule.optional]
  message = args[rule.arity + rule.optional :]
  # Optional positionals are filled before anything counts as the failure message.
  expectation = rule.build(positional)
  if message:
    expectation += f", {message[0]}"
  return expectation
