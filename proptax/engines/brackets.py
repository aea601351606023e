"""Tax bracket configuration.

Federal ordinary-income brackets, standard deductions, the SALT cap and the
per-dependent credit. Keyed by tax year and filing status. Never hardcode
these values in computation functions.

Each bracket is ``(upper_bound, base_tax, rate)``: income up to
``upper_bound`` owes ``base_tax`` plus ``rate`` on the excess over the
previous bracket's upper bound. The top bracket's upper bound is None.

Sources:
  - 2023: IRS Rev. Proc. 2022-38
  - 2024: IRS Rev. Proc. 2023-34
"""

from decimal import Decimal

from proptax.models.enums import FilingStatus

Bracket = tuple[Decimal | None, Decimal, Decimal]

# ---------------------------------------------------------------------------
# Federal ordinary income brackets: {year: {filing_status: [(upper, base, rate), ...]}}
# ---------------------------------------------------------------------------
FEDERAL_BRACKETS: dict[int, dict[FilingStatus, list[Bracket]]] = {
    2023: {
        FilingStatus.SINGLE: [
            (Decimal("11000"), Decimal("0"), Decimal("0.10")),
            (Decimal("44725"), Decimal("1100"), Decimal("0.12")),
            (Decimal("95375"), Decimal("5147"), Decimal("0.22")),
            (Decimal("182100"), Decimal("16290"), Decimal("0.24")),
            (Decimal("231250"), Decimal("37104"), Decimal("0.32")),
            (Decimal("578125"), Decimal("52832"), Decimal("0.35")),
            (None, Decimal("174238.25"), Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("22000"), Decimal("0"), Decimal("0.10")),
            (Decimal("89450"), Decimal("2200"), Decimal("0.12")),
            (Decimal("190750"), Decimal("10294"), Decimal("0.22")),
            (Decimal("364200"), Decimal("32580"), Decimal("0.24")),
            (Decimal("462500"), Decimal("74208"), Decimal("0.32")),
            (Decimal("693750"), Decimal("105664"), Decimal("0.35")),
            (None, Decimal("186601.50"), Decimal("0.37")),
        ],
    },
    2024: {
        FilingStatus.SINGLE: [
            (Decimal("11600"), Decimal("0"), Decimal("0.10")),
            (Decimal("47150"), Decimal("1160"), Decimal("0.12")),
            (Decimal("100525"), Decimal("5426"), Decimal("0.22")),
            (Decimal("191950"), Decimal("17168.50"), Decimal("0.24")),
            (Decimal("243725"), Decimal("39110.50"), Decimal("0.32")),
            (Decimal("609350"), Decimal("55678.50"), Decimal("0.35")),
            (None, Decimal("183647.25"), Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("23200"), Decimal("0"), Decimal("0.10")),
            (Decimal("94300"), Decimal("2320"), Decimal("0.12")),
            (Decimal("201050"), Decimal("10852"), Decimal("0.22")),
            (Decimal("383900"), Decimal("34337"), Decimal("0.24")),
            (Decimal("487450"), Decimal("78221"), Decimal("0.32")),
            (Decimal("731200"), Decimal("111357"), Decimal("0.35")),
            (None, Decimal("196669.50"), Decimal("0.37")),
        ],
    },
}

# ---------------------------------------------------------------------------
# Federal standard deduction
# ---------------------------------------------------------------------------
FEDERAL_STANDARD_DEDUCTION: dict[int, dict[FilingStatus, Decimal]] = {
    2023: {
        FilingStatus.SINGLE: Decimal("13850"),
        FilingStatus.MFJ: Decimal("27700"),
    },
    2024: {
        FilingStatus.SINGLE: Decimal("14600"),
        FilingStatus.MFJ: Decimal("29200"),
    },
}

# ---------------------------------------------------------------------------
# SALT cap per IRC Section 164(b)(6) — TCJA 2018-2025
# ---------------------------------------------------------------------------
FEDERAL_SALT_CAP: dict[int, Decimal] = {
    2023: Decimal("10000"),
    2024: Decimal("10000"),
}

# ---------------------------------------------------------------------------
# Credit per dependent (flat, no phase-out)
# ---------------------------------------------------------------------------
DEPENDENT_CREDIT: dict[int, Decimal] = {
    2023: Decimal("2000"),
    2024: Decimal("2000"),
}

SUPPORTED_TAX_YEARS: tuple[int, ...] = tuple(sorted(FEDERAL_BRACKETS))
