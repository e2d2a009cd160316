"""Check one transcribed segment and print every mistake."""

from prepis import Checker, format_report

checker = Checker.from_lists(
    atoms=list("aábcčdďeéěfghiíjklmnňoópqrřsštťuúůvwxyýzž") + ["ch"],
    after_angle=["SM", "SJ"],
)

parsed = checker("čarala b%nga <SM máro")
print(format_report(parsed))
