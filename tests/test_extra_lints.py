"""Tests for the project lint script."""

import importlib.util
import sys
from pathlib import Path
from types import ModuleType

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "extra_lints.py"


def load_lints() -> ModuleType:
    spec = importlib.util.spec_from_file_location("extra_lints", SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def rules_for(filename: str, source: str) -> list[str]:
    lints = load_lints()
    return [error.rule for error in lints.lint_source(Path(filename), source)]


def test_clean_library_source() -> None:
    source = (
        "import logging\n"
        "from random import Random\n"
        "logger = logging.getLogger(__name__)\n"
        "def draw(rng: Random, n: int) -> int:\n"
        "    return rng.randrange(n)\n"
    )
    assert rules_for("sampler.py", source) == []


def test_global_random_in_library() -> None:
    source = "import random\ndef draw(n):\n    return random.randrange(n)\n"
    assert rules_for("sampler.py", source) == ["global-random"]


def test_global_random_allowed_in_tests() -> None:
    source = "import random\ndef test_x():\n    random.shuffle([1, 2])\n"
    assert rules_for("test_sampler.py", source) == []


def test_print_in_library() -> None:
    assert rules_for("table.py", "print('hi')\n") == ["no-print"]


def test_mutable_default() -> None:
    source = "def f(x=[]):\n    return x\ndef g(y=dict()):\n    return y\n"
    assert rules_for("table.py", source) == ["mutable-default", "mutable-default"]


def test_bare_except() -> None:
    source = "try:\n    pass\nexcept:\n    raise\n"
    assert rules_for("table.py", source) == ["bare-except"]


def test_class_based_test() -> None:
    source = "class TestThing:\n    def test_a(self):\n        pass\n"
    assert rules_for("test_thing.py", source) == ["no-class-tests"]


def test_stateful_testcase_assignment_allowed() -> None:
    source = (
        "from hypothesis.stateful import RuleBasedStateMachine\n"
        "class Machine(RuleBasedStateMachine):\n"
        "    pass\n"
        "TestMachine = Machine.TestCase\n"
    )
    assert rules_for("test_machine.py", source) == []


def test_syntax_error_reported() -> None:
    assert rules_for("broken.py", "def (:\n") == ["syntax-error"]


def test_project_tree_is_clean() -> None:
    lints = load_lints()
    root = SCRIPT.parent.parent
    errors = []
    for directory in ("src", "tests"):
        for py_file in (root / directory).rglob("*.py"):
            errors.extend(lints.lint_file(py_file))
    assert errors == [], "\n".join(str(error) for error in errors)
