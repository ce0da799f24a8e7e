"""SOLID principle violation detection using AST analysis.

This module detects violations of all five SOLID principles:
- Single Responsibility (SRP): Classes whose methods span several responsibilities
- Open/Closed (OCP): if/elif chains dispatching on a type tag or isinstance
- Liskov Substitution (LSP): Overrides that refuse a concrete base behaviour
- Interface Segregation (ISP): Abstract methods implemented only by raising
- Dependency Inversion (DIP): Dependencies instantiated directly in __init__

Detection is based on AST analysis of Python source code. Base classes are
only resolved within the same file.
"""

from __future__ import annotations

import ast
import logging
from collections import defaultdict
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from solid_examples.catalog import Principle
from solid_examples.config import CheckerConfig

from .models import CheckReport, Finding, Priority, Severity

logger = logging.getLogger(__name__)

FunctionNode = Union[ast.FunctionDef, ast.AsyncFunctionDef]


class SOLIDChecker:
    """Detects SOLID principle violations using AST analysis."""

    # Name tokens that tie a method to a responsibility, matched in order
    RESPONSIBILITY_KEYWORDS: dict[str, tuple[str, ...]] = {
        "validation": ("validate", "verify", "check", "valid"),
        "persistence": (
            "save", "load", "delete", "database", "db", "repository",
            "store", "persist", "insert", "query",
        ),
        "messaging": ("send", "email", "mail", "notify", "notification", "sms", "message"),
        "logging": ("log", "audit", "trace"),
        "rendering": ("render", "print", "display", "format", "report"),
        "auth": ("login", "logout", "authenticate", "authorize", "permission"),
    }

    # Types that are considered value objects (not dependencies)
    VALUE_TYPES = {
        "dict", "list", "set", "tuple", "frozenset",
        "str", "int", "float", "bool", "bytes",
        "datetime", "date", "time", "timedelta",
        "Path", "UUID", "Decimal",
    }

    # Standard library instantiations that are OK
    STDLIB_CLASSES = {
        "datetime", "date", "time", "timedelta",
        "Path", "PurePath", "PosixPath", "WindowsPath",
        "UUID", "Decimal", "Fraction",
        "defaultdict", "Counter", "OrderedDict", "deque",
        "Thread", "Lock", "RLock", "Event", "Semaphore",
    }

    def __init__(self, config: Optional[CheckerConfig] = None) -> None:
        self.config = config or CheckerConfig()
        self._allowed_instantiations = (
            self.VALUE_TYPES | self.STDLIB_CLASSES | set(self.config.allowed_instantiations)
        )
        self._finding_counter = 0

    def _next_finding_id(self) -> str:
        self._finding_counter += 1
        return f"SOLID-{self._finding_counter:03d}"

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def analyze_file(self, file_path: Path) -> list[Finding]:
        """Analyze a Python file for SOLID violations.

        Args:
            file_path: Path to the Python file to analyze

        Returns:
            List of findings; empty if the file is missing or does not parse
        """
        try:
            if not file_path.exists():
                return []
            # Bytes let ast honour PEP 263 encoding declarations
            source = file_path.read_bytes()
        except OSError as e:
            logger.warning("Cannot read %s: %s", file_path, e)
            return []

        return self.analyze_source(source, str(file_path))

    def analyze_source(
        self, source: Union[str, bytes], file_path: str = "<string>"
    ) -> list[Finding]:
        """Analyze Python source (text, or raw bytes from a file) for SOLID violations."""
        try:
            tree = ast.parse(source)
        except (SyntaxError, ValueError) as e:
            # ValueError covers undecodable bytes and null bytes
            logger.warning("Cannot parse %s: %s", file_path, e)
            return []

        findings: list[Finding] = []
        findings.extend(self.detect_srp_violations(tree, file_path))
        findings.extend(self.detect_ocp_violations(tree, file_path))
        findings.extend(self.detect_lsp_violations(tree, file_path))
        findings.extend(self.detect_isp_violations(tree, file_path))
        findings.extend(self.detect_dip_violations(tree, file_path))
        return findings

    def analyze_paths(self, paths: Iterable[Path]) -> CheckReport:
        """Analyze files and directories (searched recursively for *.py).

        Returns:
            CheckReport covering every file that was analyzed
        """
        report = CheckReport()
        for file_path in self._expand_paths(paths):
            report.files_analyzed.append(str(file_path))
            report.findings.extend(self.analyze_file(file_path))
        logger.debug(
            "Analyzed %d files, %d findings",
            len(report.files_analyzed), report.total_issues,
        )
        return report

    @staticmethod
    def _expand_paths(paths: Iterable[Path]) -> list[Path]:
        files: list[Path] = []
        seen: set[Path] = set()
        for path in paths:
            candidates = sorted(path.rglob("*.py")) if path.is_dir() else [path]
            for candidate in candidates:
                if candidate not in seen:
                    seen.add(candidate)
                    files.append(candidate)
        return files

    # ------------------------------------------------------------------
    # SRP
    # ------------------------------------------------------------------

    def detect_srp_violations(self, tree: ast.AST, file_path: str) -> list[Finding]:
        """Detect Single Responsibility Principle violations.

        Methods are clustered by the responsibility their names point at.
        A class with more than ``cluster_threshold`` clusters is flagged.
        """
        findings: list[Finding] = []

        for node in ast.walk(tree):
            if not isinstance(node, ast.ClassDef):
                continue

            clusters = self._cluster_methods(node)
            if len(clusters) <= self.config.cluster_threshold:
                continue

            names = sorted(clusters)
            findings.append(Finding(
                finding_id=self._next_finding_id(),
                principle=Principle.SRP,
                severity=Severity.MEDIUM,
                file=file_path,
                line=node.lineno,
                title=f"SRP Violation: {node.name}",
                description=(
                    f"Class '{node.name}' has {len(clusters)} distinct responsibilities: "
                    f"{', '.join(names)}. Consider extracting a class for each."
                ),
                code_snippet=f"class {node.name}:",
                refactoring_pattern="Extract Class",
                refactoring_steps=[
                    f"Create a class for each responsibility: {', '.join(names)}",
                    "Move the related methods to the new classes",
                    f"Leave {node.name} holding only its data",
                ],
                priority=Priority.FIX_LATER,
                confidence=0.8,
            ))

        return findings

    def _cluster_methods(self, class_node: ast.ClassDef) -> dict[str, list[str]]:
        """Group a class's non-dunder methods by responsibility.

        e.g. ['save_to_database', 'delete_from_database'] -> 'persistence'
             ['send_welcome_email'] -> 'messaging'

        Methods matching no keyword are grouped by their first name token.
        Clusters smaller than ``min_cluster_size`` are dropped.
        """
        clusters: dict[str, list[str]] = defaultdict(list)

        for item in class_node.body:
            if not isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef)):
                continue
            name = item.name
            if name.startswith("__") and name.endswith("__"):
                continue

            tokens = [token for token in name.lower().strip("_").split("_") if token]
            clusters[self._responsibility_for(tokens)].append(name)

        return {
            responsibility: methods
            for responsibility, methods in clusters.items()
            if len(methods) >= self.config.min_cluster_size
        }

    def _responsibility_for(self, tokens: list[str]) -> str:
        for responsibility, keywords in self.RESPONSIBILITY_KEYWORDS.items():
            if any(token in keywords for token in tokens):
                return responsibility
        return f"other_{tokens[0]}" if tokens else "other"

    # ------------------------------------------------------------------
    # OCP
    # ------------------------------------------------------------------

    def detect_ocp_violations(self, tree: ast.AST, file_path: str) -> list[Finding]:
        """Detect Open/Closed Principle violations.

        Look for if/elif chains that dispatch on one subject, either by
        comparing it with string tags or by isinstance/type checks.
        These should be replaced with polymorphism.
        """
        findings: list[Finding] = []
        chained: set[int] = set()

        for node in ast.walk(tree):
            if not isinstance(node, ast.If) or id(node) in chained:
                continue

            # ast.walk is breadth-first, so the head of a chain comes first
            chain = [node]
            current = node
            while len(current.orelse) == 1 and isinstance(current.orelse[0], ast.If):
                current = current.orelse[0]
                chained.add(id(current))
                chain.append(current)

            # One branch per If node per subject; a condition naming several
            # cases (tuple isinstance, `or`) is still a single branch
            branch_counts: dict[str, int] = defaultdict(int)
            labels_by_subject: dict[str, list[str]] = defaultdict(list)
            for branch in chain:
                tested: set[str] = set()
                for subject, label in self._dispatch_keys(branch.test):
                    labels_by_subject[subject].append(label)
                    tested.add(subject)
                for subject in tested:
                    branch_counts[subject] += 1

            for subject, count in branch_counts.items():
                if count < self.config.min_chain_branches:
                    continue

                labels = labels_by_subject[subject]
                shown = ", ".join(labels[:5]) + ("..." if len(labels) > 5 else "")
                findings.append(Finding(
                    finding_id=self._next_finding_id(),
                    principle=Principle.OCP,
                    severity=Severity.MEDIUM,
                    file=file_path,
                    line=node.lineno,
                    title="OCP Violation: Type Dispatch Chain",
                    description=(
                        f"Found an if/elif chain with {count} branches on "
                        f"'{subject}' ({shown}). Every new case means modifying this "
                        f"code. Consider polymorphism instead."
                    ),
                    code_snippet=f"if {ast.unparse(node.test)}: ...",
                    refactoring_pattern="Replace Conditional with Polymorphism",
                    refactoring_steps=[
                        "Define a common base class with an abstract method",
                        f"Implement the method once per case: {', '.join(labels[:3])}",
                        "Replace the if/elif chain with a single method call",
                    ],
                    priority=Priority.FIX_LATER,
                    confidence=0.85,
                ))

        return findings

    def _dispatch_keys(self, test: ast.AST) -> list[tuple[str, str]]:
        """Extract (subject, case) pairs from an if condition.

        Recognised forms:
            x == "tag"           -> ("x", "'tag'")
            isinstance(x, T)     -> ("isinstance(x)", "T")
            type(x) == T         -> ("type(x)", "T")
        """
        keys: list[tuple[str, str]] = []

        if isinstance(test, ast.BoolOp):
            for value in test.values:
                keys.extend(self._dispatch_keys(value))

        elif isinstance(test, ast.Call):
            func = test.func
            if isinstance(func, ast.Name) and func.id == "isinstance" and len(test.args) >= 2:
                subject = f"isinstance({ast.unparse(test.args[0])})"
                type_arg = test.args[1]
                elements = type_arg.elts if isinstance(type_arg, ast.Tuple) else [type_arg]
                for element in elements:
                    keys.append((subject, ast.unparse(element)))

        elif isinstance(test, ast.Compare) and len(test.ops) == 1:
            if not isinstance(test.ops[0], (ast.Eq, ast.Is)):
                return keys
            left, right = test.left, test.comparators[0]

            # type(x) == T
            if (
                isinstance(left, ast.Call)
                and isinstance(left.func, ast.Name)
                and left.func.id == "type"
                and isinstance(right, (ast.Name, ast.Attribute))
            ):
                keys.append((ast.unparse(left), ast.unparse(right)))
                return keys

            # x == "tag" or "tag" == x
            if isinstance(left, ast.Constant) and isinstance(right, (ast.Name, ast.Attribute)):
                left, right = right, left
            if (
                isinstance(left, (ast.Name, ast.Attribute))
                and isinstance(right, ast.Constant)
                and isinstance(right.value, str)
            ):
                keys.append((ast.unparse(left), repr(right.value)))

        return keys

    # ------------------------------------------------------------------
    # LSP / ISP
    # ------------------------------------------------------------------

    def detect_lsp_violations(self, tree: ast.AST, file_path: str) -> list[Finding]:
        """Detect Liskov Substitution Principle violations.

        A subclass method that only raises, overriding a concrete method of a
        base class, refuses behaviour callers of the base type rely on.
        """
        findings: list[Finding] = []

        for class_node, method, base_name, base_method in self._refusing_overrides(tree):
            if self._is_abstract(base_method):
                continue

            findings.append(Finding(
                finding_id=self._next_finding_id(),
                principle=Principle.LSP,
                severity=Severity.HIGH,
                file=file_path,
                line=method.lineno,
                title=f"LSP Violation: {class_node.name}.{method.name}",
                description=(
                    f"'{class_node.name}.{method.name}' only raises, but "
                    f"'{base_name}.{method.name}' works. Code written against "
                    f"{base_name} breaks when given a {class_node.name}."
                ),
                code_snippet=f"def {method.name}(self): raise ...",
                refactoring_pattern="Extract Capability Interface",
                refactoring_steps=[
                    f"Move '{method.name}' out of {base_name} into a capability class",
                    "Inherit the capability only in classes that support it",
                    "Type callers against the capability instead of the base class",
                ],
                priority=Priority.FIX_NOW,
                confidence=0.85,
            ))

        return findings

    def detect_isp_violations(self, tree: ast.AST, file_path: str) -> list[Finding]:
        """Detect Interface Segregation Principle violations.

        A subclass that implements an abstract method only by raising was
        forced into an interface wider than it needs.
        """
        findings: list[Finding] = []

        for class_node, method, base_name, base_method in self._refusing_overrides(tree):
            if not self._is_abstract(base_method):
                continue

            findings.append(Finding(
                finding_id=self._next_finding_id(),
                principle=Principle.ISP,
                severity=Severity.MEDIUM,
                file=file_path,
                line=method.lineno,
                title=f"ISP Violation: {class_node.name}.{method.name}",
                description=(
                    f"'{class_node.name}' is forced to implement '{method.name}' from "
                    f"interface '{base_name}' and can only refuse it. Consider "
                    f"splitting '{base_name}' into narrower interfaces."
                ),
                code_snippet=f"def {method.name}(self): raise ...",
                refactoring_pattern="Segregate Interface",
                refactoring_steps=[
                    f"Split '{base_name}' into one interface per capability",
                    f"Have {class_node.name} implement only the interfaces it supports",
                    "Type callers against the narrow interface they use",
                ],
                priority=Priority.FIX_LATER,
                confidence=0.8,
            ))

        return findings

    def _refusing_overrides(
        self, tree: ast.AST
    ) -> Iterator[tuple[ast.ClassDef, FunctionNode, str, FunctionNode]]:
        """Yield (class, method, base class name, base method) for methods
        whose body only raises and that override a method of a base class
        defined in the same file."""
        classes = {
            node.name: node for node in ast.walk(tree) if isinstance(node, ast.ClassDef)
        }

        for class_node in classes.values():
            for item in class_node.body:
                if not isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef)):
                    continue
                if not self._only_raises(item) or self._has_abstract_decorator(item):
                    continue

                inherited = self._find_inherited(classes, class_node, item.name, set())
                if inherited is None:
                    continue
                base_name, base_method = inherited
                # Re-declaring an abstract method as abstract refuses nothing
                if self._is_abstract(item) and self._is_abstract(base_method):
                    continue
                yield class_node, item, base_name, base_method

    def _find_inherited(
        self,
        classes: dict[str, ast.ClassDef],
        class_node: ast.ClassDef,
        method_name: str,
        visited: set[str],
    ) -> Optional[tuple[str, FunctionNode]]:
        visited.add(class_node.name)
        for base in class_node.bases:
            if isinstance(base, ast.Name):
                base_name = base.id
            elif isinstance(base, ast.Attribute):
                base_name = base.attr
            else:
                continue
            base_node = classes.get(base_name)
            if base_node is None or base_name in visited:
                continue

            for item in base_node.body:
                if isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef)) and item.name == method_name:
                    return base_name, item

            found = self._find_inherited(classes, base_node, method_name, visited)
            if found is not None:
                return found
        return None

    @staticmethod
    def _body_without_docstring(func: FunctionNode) -> list[ast.stmt]:
        body = list(func.body)
        if (
            body
            and isinstance(body[0], ast.Expr)
            and isinstance(body[0].value, ast.Constant)
            and isinstance(body[0].value.value, str)
        ):
            body = body[1:]
        return body

    def _only_raises(self, func: FunctionNode) -> bool:
        body = self._body_without_docstring(func)
        return len(body) == 1 and isinstance(body[0], ast.Raise)

    @staticmethod
    def _has_abstract_decorator(func: FunctionNode) -> bool:
        for decorator in func.decorator_list:
            if isinstance(decorator, ast.Name) and decorator.id == "abstractmethod":
                return True
            if isinstance(decorator, ast.Attribute) and decorator.attr == "abstractmethod":
                return True
        return False

    def _is_abstract(self, func: FunctionNode) -> bool:
        """True for @abstractmethod or a body that only raises NotImplementedError."""
        if self._has_abstract_decorator(func):
            return True

        body = self._body_without_docstring(func)
        if len(body) == 1 and isinstance(body[0], ast.Raise) and body[0].exc is not None:
            exc = body[0].exc
            if isinstance(exc, ast.Call):
                exc = exc.func
            return isinstance(exc, ast.Name) and exc.id == "NotImplementedError"
        return False

    # ------------------------------------------------------------------
    # DIP
    # ------------------------------------------------------------------

    def detect_dip_violations(self, tree: ast.AST, file_path: str) -> list[Finding]:
        """Detect Dependency Inversion Principle violations.

        Look for classes that instantiate their dependencies directly
        in __init__ instead of accepting them as parameters.
        """
        findings: list[Finding] = []

        for node in ast.walk(tree):
            if not isinstance(node, ast.ClassDef):
                continue

            init_method: Optional[FunctionNode] = None
            for item in node.body:
                if isinstance(item, ast.FunctionDef) and item.name == "__init__":
                    init_method = item
                    break
            if init_method is None:
                continue

            violations: list[tuple[int, str, str]] = []
            for stmt in ast.walk(init_method):
                if isinstance(stmt, ast.Assign):
                    targets, value = stmt.targets, stmt.value
                elif isinstance(stmt, ast.AnnAssign) and stmt.value is not None:
                    targets, value = [stmt.target], stmt.value
                else:
                    continue

                class_name = self._instantiated_class(value)
                if class_name is None:
                    continue
                for target in targets:
                    if (
                        isinstance(target, ast.Attribute)
                        and isinstance(target.value, ast.Name)
                        and target.value.id == "self"
                    ):
                        violations.append((stmt.lineno, target.attr, class_name))

            if not violations:
                continue

            classes = [class_name for _, _, class_name in violations]
            first_line, attr, first_class = violations[0]
            findings.append(Finding(
                finding_id=self._next_finding_id(),
                principle=Principle.DIP,
                severity=Severity.MEDIUM,
                file=file_path,
                line=first_line,
                title=f"DIP Violation: {node.name}",
                description=(
                    f"Class '{node.name}' instantiates its dependencies directly in __init__: "
                    f"{', '.join(classes[:5])}{'...' if len(classes) > 5 else ''}. "
                    f"Consider accepting them as constructor parameters."
                ),
                code_snippet=f"self.{attr} = {first_class}()",
                refactoring_pattern="Inject Dependencies",
                refactoring_steps=[
                    f"Add __init__ parameters for: {', '.join(classes[:3])}",
                    "Type the parameters against an abstraction (ABC or Protocol)",
                    "Create the concrete instances at the call site",
                ],
                priority=Priority.FIX_NOW,
                confidence=0.9,
            ))

        return findings

    def _instantiated_class(self, value: ast.AST) -> Optional[str]:
        """Name of the class a call constructs, if it looks like a dependency."""
        if not isinstance(value, ast.Call) or not isinstance(value.func, ast.Name):
            return None
        name = value.func.id
        if not name[:1].isupper() or name in self._allowed_instantiations:
            return None
        return name
