#!/usr/bin/env python3
import ast
import os
import sys

# Directories to check (runtime code)
CHECK_DIRS = ["routes", "services", "utils"]

# The only modules allowed to own logo sizing / header placement
OWNER_FILES = {
    os.path.join("services", "header_layout.py"),
}

# Resolver names that must not be re-implemented elsewhere
FORBIDDEN_FUNCTIONS = {
    "get_logo_height",
    "get_logo_dimensions",
    "get_standard_logo_height",
    "get_header_layout",
}

# A dict literal keyed by two or more of these maps tiers to sizes
TIER_NAMES = {"small", "medium", "large", "extra-large"}


def _is_tier_table(node):
    if not isinstance(node, ast.Dict):
        return False
    keys = {k.value for k in node.keys if isinstance(k, ast.Constant) and isinstance(k.value, str)}
    return len(keys & TIER_NAMES) >= 2


def find_violations(source, rel_path):
    """
    Return a list of "path:line: message" strings for one module.
    """
    if rel_path in OWNER_FILES:
        return []

    violations = []
    tree = ast.parse(source, filename=rel_path)

    for node in ast.walk(tree):
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)) and node.name in FORBIDDEN_FUNCTIONS:
            violations.append(f"{rel_path}:{node.lineno}: defines {node.name}(); import it from services.header_layout")
        elif isinstance(node, (ast.Assign, ast.AnnAssign)) and _is_tier_table(node.value):
            violations.append(f"{rel_path}:{node.lineno}: logo size tier table; use constants.LOGO_HEIGHTS")

    return violations


def scan(project_root):
    violations = []
    for relative_dir in CHECK_DIRS:
        abs_dir = os.path.join(project_root, relative_dir)
        if not os.path.exists(abs_dir):
            continue

        for root, _, files in os.walk(abs_dir):
            for filename in sorted(files):
                if not filename.endswith(".py"):
                    continue
                filepath = os.path.join(root, filename)
                rel_path = os.path.relpath(filepath, project_root)
                with open(filepath, "r", encoding="utf-8") as f:
                    violations.extend(find_violations(f.read(), rel_path))
    return violations


def check_layout_delegation():
    """
    Scans runtime code for copies of the header layout engine.
    Fails if any template, route or helper carries its own logo sizing or
    placement logic instead of delegating to services/header_layout.py.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    print(f"Scanning for duplicated header layout logic in: {', '.join(CHECK_DIRS)}...")

    violations = scan(project_root)
    for v in violations:
        print(f"  [FAIL] {v}")

    if violations:
        print(f"\n❌ Found {len(violations)} copies of header layout logic.")
        print("Delegate to services.header_layout instead.")
        sys.exit(1)

    print("\n✅ All header layout decisions delegate to services.header_layout.")
    sys.exit(0)


if __name__ == "__main__":
    check_layout_delegation()
