"""Store a validation result as JSON and load it back."""

from prepis import check, compile_config
from prepis.serialization import from_json, to_json

config = compile_config(blacklist=["xxx"], atoms=list("anoe"), after_angle=["SM"])
parsed = check("ano <XY ne> xxx (", config)

payload = to_json(parsed, indent=2)
print(payload)

restored = from_json(payload)
assert restored == parsed
print("Round trip OK:", len(restored.mistakes), "mistakes")
