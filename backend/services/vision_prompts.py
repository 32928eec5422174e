"""
Vision prompts for exterior and equipment photo analysis
Both ask for JSON only, in the shape the vision normalizer expects
"""

from typing import Optional

SYSTEM_PROMPT = (
    "You are an HVAC field assistant that outputs ONLY valid JSON. "
    "No explanatory text, no markdown, just pure JSON."
)


def create_exterior_prompt(address: Optional[str] = None) -> str:
    location = f"\nThe house is at: {address}\n" if address else ""
    return f"""You are helping an HVAC load calculation tool.
{location}
Given this exterior house photo, estimate:

- number of stories (1, 1.5, 2, 3). If unsure, use "unknown".
- siding type (vinyl, wood, fiber cement, stucco, brick, mixed, unknown).
- rough window count on the visible sides (few, average, many, or "unknown").
- presence of gutters (yes, no, unclear).
- general exterior condition (good, average, poor).
- a confidence score from 0 to 1.

Return ONLY valid JSON and nothing else:

{{
  "stories": 2,
  "siding": "vinyl",
  "windows": "average",
  "gutters": "yes",
  "condition": "average",
  "confidence": 0.8
}}
"""


def create_equipment_prompt(image_count: int) -> str:
    return f"""You are helping an HVAC load calculation and replacement sizing tool.

You are given {image_count} image(s). At least one is a CLOSE-UP of an HVAC equipment data label.
Other images may show the whole unit, the flue, or surrounding equipment.

Read the clearest label carefully. Use wide shots ONLY to judge vent type
(metal B-vent vs PVC) and general equipment style.

If you cannot find a field, set it to null or "unknown". Return ONLY JSON like this:

{{
  "equipmentType": "furnace",
  "manufacturer": "Trane",
  "modelNumber": "AUD2B080A9V3VBA",
  "serialNumber": "123745N3G1G",
  "nominalTonnage": null,
  "inputBTUH": 80000,
  "outputBTUH": null,
  "seer": null,
  "seer2": null,
  "hspf": null,
  "hspf2": null,
  "afue": 80,
  "refrigerant": null,
  "heatStripKW": null,
  "manufactureYear": 2012,
  "stages": "two-stage",
  "ventType": "metal_flue",
  "afueSource": "label"
}}

Field values:
- equipmentType: "furnace", "air_handler", "heat_pump", "ac_condenser", "package_unit", or "other"
- stages: "single", "two-stage", "variable", or "unknown"
- ventType: "metal_flue" (metal/B-vent), "pvc", "mixed", or "unknown"
- afueSource: "label" (read from the rating plate), "inferred", "model_lookup", or "unknown"
- manufactureYear: 4-digit year, from the label or the serial number pattern

Be conservative: prefer "unknown"/null over a wrong number. If the AFUE is not
readable, leave "afue": null; a separate model lookup step may fill it in.
"""
