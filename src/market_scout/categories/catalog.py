"""Built-in category catalog.

Order is the display order of the category selector. The first entry is the
default selection.

Product categories follow the activated-carbon application portfolio; the
last two entries use the provider's headline feed and company profile.
"""

from market_scout.models.category import Category, RenderVariant

# fmt: off
DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(name="PFAS"),
    Category(name="Soil Remediation"),
    Category(name="Mining"),
    Category(name="Gold Recovery"),
    Category(name="Drinking Water"),
    Category(name="Wastewater Treatment"),
    Category(name="Air & Gas Purification"),
    Category(name="Mercury Removal"),
    Category(name="Food & Beverage"),
    Category(name="Energy Storage"),
    Category(name="Catalyst Support"),
    Category(name="Automotive Filters"),
    Category(name="Medical & Pharma"),
    Category(name="Nuclear Applications"),

    # Title/link-only feed
    Category(name="Industry Headlines", variant=RenderVariant.LINK_LIST),
    # Provider returns a single company object
    Category(
        name="Company Profile",
        reference_url="https://www.haycarb.com",
        variant=RenderVariant.PROFILE,
    ),
)
# fmt: on
