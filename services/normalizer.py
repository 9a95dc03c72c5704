import json
import re
from utils.utils import setup_logger

logger = setup_logger(__name__)

NOT_AVAILABLE = "Not available"
INVALID_RESPONSE = "Invalid response from AI"

MEDICINE_FIELDS = (
    "medicine_name",
    "uses",
    "side_effects",
    "dosage",
    "manufacturer",
    "precautions",
    "expiry_date",
    "composition",
)

FENCED_JSON = re.compile(r"```json\n([\s\S]*?)\n```")


def placeholder_record(error=INVALID_RESPONSE):
    record = {field: NOT_AVAILABLE for field in MEDICINE_FIELDS}
    record["error"] = error
    return record


def extract_json(text):
    """
    Pull a JSON value out of raw model text.

    A ```json fenced block wins over the whole text. Anything that fails to
    parse yields the placeholder record.
    """
    try:
        match = FENCED_JSON.search(text)
        if match:
            return json.loads(match.group(1))
        return json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning(f"Could not parse AI response as JSON: {e}")
        return placeholder_record()


def coerce_record(parsed):
    """Force a parsed value into the eight-field Medicine Record shape."""
    if not isinstance(parsed, dict):
        return placeholder_record()

    record = {}
    for field in MEDICINE_FIELDS:
        value = parsed.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            record[field] = NOT_AVAILABLE
        elif isinstance(value, str):
            record[field] = value.strip()
        elif isinstance(value, list):
            record[field] = ", ".join(str(v) for v in value)
        elif isinstance(value, (dict, bool)):
            record[field] = json.dumps(value)
        else:
            record[field] = str(value)
    if parsed.get("error"):
        record["error"] = str(parsed["error"])
    return record


class ResponseNormalizer:
    def __init__(self, strict=False):
        self.strict = strict

    def normalize(self, text):
        parsed = extract_json(text)
        if self.strict:
            return coerce_record(parsed)
        return parsed
