#!/usr/bin/env python3
"""Validate interval table YAML files against the schema."""
import sys
from pathlib import Path

import yaml

from estimator import InvalidTableError, load_schema, load_table


def validate_table_file(filepath: Path, schema: dict) -> list[str]:
    """Load a table file the way the CLI and web app do. Returns list of errors."""
    try:
        load_table(filepath, schema)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]
    except InvalidTableError as e:
        errors = [f"Schema validation error: {e.message}"]
        if e.path:
            errors.append(f"  at path: {e.path}")
        return errors
    except (OSError, ValueError) as e:
        return [f"Error: {e}"]
    return []


def main():
    """Validate all interval table YAML files in the tables/ directory."""
    schema = load_schema()
    tables_dir = Path(__file__).parent / "tables"

    if not tables_dir.exists():
        print(f"Error: tables directory not found: {tables_dir}")
        return 1

    yaml_files = sorted(tables_dir.glob("*.y*ml"))
    if not yaml_files:
        print(f"Warning: No YAML files found in {tables_dir}")
        return 0

    failed = [f for f in yaml_files if report(f, validate_table_file(f, schema))]
    return 1 if failed else 0


def report(filepath: Path, errors: list[str]) -> bool:
    """Print the result for one file; True when it failed."""
    print(f"{'FAIL' if errors else 'OK'}: {filepath.name}")
    for error in errors:
        print(f"  {error}")
    return bool(errors)


if __name__ == "__main__":
    sys.exit(main())
