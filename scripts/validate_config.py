#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pair_actions.config.loader import CONFIG_FILENAME, ConfigLoader
from pair_actions.config.validation import ConfigValidator
from pair_actions.errors import ConfigurationError


def main(config_dir: Optional[Path] = None) -> None:
    """Validate the merged configuration and report every problem found."""
    loader = ConfigLoader.create(config_dir)
    config_file = loader.config_dir / CONFIG_FILENAME

    if config_file.exists():
        print(f"🔍 Validating {config_file}...")
    else:
        print(f"🔍 No {CONFIG_FILENAME} in {loader.config_dir}, validating defaults...")

    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value!r})")
        sys.exit(1)

    print("✅ Configuration is valid")
    for section, values in config.items():
        print(f"  {section}:")
        for key, value in values.items():
            print(f"    {key} = {value!r}")
    sys.exit(0)


if __name__ == "__main__":
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else None)
