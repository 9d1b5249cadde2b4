import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from metatags.rules.models import MetaRules

logger = logging.getLogger(__name__)


def default_rules() -> MetaRules:
    """Rules used when no meta tags file is configured."""
    return MetaRules()


def _extract_yaml(content: str) -> str:
    # Accept a file that wraps its YAML in a ```yaml fence (e.g. a markdown doc)
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_meta_rules(path: Path) -> MetaRules:
    """
    Load and validate the meta tags file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Meta tags file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in meta tags file: {e}") from e

    try:
        rules = MetaRules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Meta tags validation failed:\n{e}") from e

    logger.info("Loaded meta tag rules from %s", path)
    return rules
