#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from typing import Any, Dict, List

from bomtrend_app.config.loader import CONFIG_FILENAME, ConfigLoader
from bomtrend_app.config.validation import ConfigValidator, ValidationError


def validate_overrides(loader: ConfigLoader, overrides: Dict[str, Any]) -> List[ValidationError]:
    """Validate the merged configuration for a set of per-call overrides."""
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating BOM trend configuration...")

    loader = ConfigLoader.create()
    print(f"   Config file: {loader.config_dir / CONFIG_FILENAME}")

    test_overrides = {
        "file only": {},
        "longer projection": {"projection": {"horizon_months": 24}},
        "alternative storage": {"chips": {"storage_technology": "UFS"}},
    }

    all_valid = True

    for label, overrides in test_overrides.items():
        print(f"\n📊 Validating {label}...")

        errors = validate_overrides(loader, overrides)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {label} configuration is valid")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
