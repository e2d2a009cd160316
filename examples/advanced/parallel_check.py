"""Check 1000 segments in parallel against one config."""

from concurrent.futures import ThreadPoolExecutor

from prepis import Checker

checker = Checker.from_lists(atoms=list("abcdefghijklmnopqrstuvwxyz"), after_angle=["SM"])
segments = [f"segment (number {i}) <SM ok>" if i % 3 else f"segment {i}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(checker, segments))

print(f"Checked {len(results)} segments in parallel")
print("Segments with mistakes:", sum(1 for r in results if not r.ok))
