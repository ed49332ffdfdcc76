"""
Progressive Personal Income Tax band tables.

Each band's limit is the WIDTH of its slice, not a cumulative ceiling.
Bands are consumed in declaration order; the last band is open-ended.

Legacy regime (Finance Act 2020):
  First ₦300,000 at 7%
  Next ₦300,000 at 11%
  Next ₦500,000 at 15%
  Next ₦500,000 at 19%
  Next ₦1,600,000 at 21%
  Above ₦3,200,000 at 24%

2026 regime (Nigeria Tax Act 2025, Fourth Schedule):
  First ₦800,000 at 0%
  Next ₦2,200,000 at 15%
  Next ₦9,000,000 at 18%
  Next ₦13,000,000 at 21%
  Next ₦25,000,000 at 23%
  Above ₦50,000,000 at 25%
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxBand:
    limit: float
    rate: float
    note: str | None = None


@dataclass(frozen=True)
class BandSlice:
    band: TaxBand
    taxable_amount: float
    tax_amount: float


LEGACY_PIT_BANDS: tuple[TaxBand, ...] = (
    TaxBand(300_000.0, 0.07),
    TaxBand(300_000.0, 0.11),
    TaxBand(500_000.0, 0.15),
    TaxBand(500_000.0, 0.19),
    TaxBand(1_600_000.0, 0.21),
    TaxBand(float("inf"), 0.24),
)

PIT_BANDS_2026: tuple[TaxBand, ...] = (
    TaxBand(800_000.0, 0.00, "Exempt Band"),
    TaxBand(2_200_000.0, 0.15, "Band 2"),
    TaxBand(9_000_000.0, 0.18, "Band 3"),
    TaxBand(13_000_000.0, 0.21, "Band 4"),
    TaxBand(25_000_000.0, 0.23, "Band 5"),
    TaxBand(float("inf"), 0.25, "Top Band"),
)


def apply_bands(taxable_income: float, bands: tuple[TaxBand, ...]) -> list[BandSlice]:
    """
    Consume taxable income slice by slice through the band table.

    Only bands that actually receive income are returned; consumption stops
    as soon as nothing remains.
    """
    slices = []
    remaining = taxable_income

    for band in bands:
        if remaining <= 0:
            break

        taxable_in_band = min(remaining, band.limit)
        slices.append(
            BandSlice(
                band=band,
                taxable_amount=round(taxable_in_band, 2),
                tax_amount=round(taxable_in_band * band.rate, 2),
            )
        )
        remaining -= taxable_in_band

    return slices
