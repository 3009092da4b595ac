#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sportsterminal.config.loader import ConfigLoader
from sportsterminal.config.validation import ConfigValidator
from sportsterminal.errors import ConfigError


def main():
    """Main validation function."""
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_path)

    print(f"🔍 Validating {loader.config_path}...")
    if not loader.config_path.exists():
        print("ℹ️  No config file; defaults apply")

    try:
        merged = loader.merge_config()
    except ConfigError as e:
        print(f"❌ {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(merged)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    for section, values in merged.items():
        if not isinstance(values, dict):
            continue
        print(f"\n📋 {section}")
        for key, value in values.items():
            print(f"  {key}: {value}")

    print("\n✅ Configuration is valid")


if __name__ == "__main__":
    main()
