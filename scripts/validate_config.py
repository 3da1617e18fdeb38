#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from solid_pricing.config.factory import build_price_calculator
from solid_pricing.config.loader import ConfigLoader
from solid_pricing.config.validation import ConfigValidator, ValidationError
from solid_pricing.errors import ConfigurationError


def validate_pricing_config(loader: ConfigLoader,
                            overrides: Optional[Dict[str, Any]] = None) -> List[ValidationError]:
    """Validate the merged pricing configuration."""
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating pricing configuration in {loader.config_dir}...")

    all_valid = True

    errors = validate_pricing_config(loader)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ Pricing configuration is valid")

    # Test call-time overrides
    print("\n📋 Testing call-time overrides...")
    test_overrides = {
        "tax": {"flat_rate": 0.1},
        "pipeline": {"shipping": {"method": "express"}},
    }

    errors = validate_pricing_config(loader, test_overrides)
    if errors:
        print("❌ Override validation failed:")
        for error in errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False
    else:
        print("✅ Override validation passed")

    # Assemble the configured strategies
    print("\n🧮 Building price calculator...")
    try:
        calculator = build_price_calculator(loader.merge_config())
        described = calculator.describe()
        print(f"✅ Discounts: {', '.join(described['discounts']) or 'none'}")
        print(f"✅ Tax: {described['tax']}")
        print(f"✅ Shipping: {described['shipping']}")
    except ConfigurationError as e:
        print(f"❌ Error building calculator: {e}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
