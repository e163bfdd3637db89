"""
Static reference catalog of luxury watch models.

Used to ground the analysis prompt; lookups are case-insensitive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WatchModel:
    """A catalog entry for one model line."""

    brand: str
    model: str
    reference_numbers: tuple[str, ...]
    year_introduced: int
    price_range: tuple[int, int]  # USD
    key_features: tuple[str, ...]
    materials: tuple[str, ...]
    movements: tuple[str, ...]


LUXURY_WATCH_CATALOG: tuple[WatchModel, ...] = (
    WatchModel(
        brand="Rolex",
        model="Submariner",
        reference_numbers=("126610LN", "126610LV", "126619LB", "126618LN", "126613LN", "126613LB", "124060", "116610LN", "116610LV"),
        year_introduced=1953,
        price_range=(9500, 45000),
        key_features=("Ceramic bezel", "Oyster case", "Mercedes hands", "300m water resistance", "Chromalight display", "Glidelock extension"),
        materials=("Oystersteel", "Yellow gold", "White gold", "Rolesor"),
        movements=("Cal. 3235", "Cal. 3230"),
    ),
    WatchModel(
        brand="Rolex",
        model="Daytona",
        reference_numbers=("126500LN", "126508", "126509", "126506", "126519LN", "126500WN", "116500LN", "116520"),
        year_introduced=1963,
        price_range=(30000, 95000),
        key_features=("Chronograph", "Tachymeter bezel", "Oyster case", "Racing design", "Ceramic bezel", "Cal. 4131 movement"),
        materials=("Oystersteel", "White gold", "Yellow gold", "Everose gold", "Platinum"),
        movements=("Cal. 4131", "Cal. 4130"),
    ),
    WatchModel(
        brand="Rolex",
        model="GMT-Master II",
        reference_numbers=("126710BLRO", "126710BLNR", "126710GRNR", "126720VTNR", "126711CHNR", "126715CHNR", "126719BLRO", "116710LN"),
        year_introduced=1982,
        price_range=(11000, 52000),
        key_features=("Dual time zone", "Ceramic bezel", "Jubilee/Oyster bracelet", "24-hour hand", "Chromalight display", "Pepsi/Batman/Sprite bezels"),
        materials=("Oystersteel", "Yellow gold", "White gold", "Everose gold", "Rolesor"),
        movements=("Cal. 3285", "Cal. 3186"),
    ),
    WatchModel(
        brand="Rolex",
        model="Datejust",
        reference_numbers=("126234", "126200", "126334", "126333", "126300", "126301", "278274", "278383", "278384", "116234"),
        year_introduced=1945,
        price_range=(7200, 18000),
        key_features=("Date window", "Cyclops lens", "Fluted bezel", "Jubilee/Oyster bracelet", "Chromalight display", "36mm/41mm sizes"),
        materials=("Oystersteel", "Yellow gold", "White gold", "Everose gold", "Rolesor"),
        movements=("Cal. 3235", "Cal. 3135"),
    ),
    WatchModel(
        brand="Rolex",
        model="Day-Date",
        reference_numbers=("228238", "228235", "228239", "228206", "228349RBR", "128238", "118238"),
        year_introduced=1956,
        price_range=(38000, 120000),
        key_features=("Day and date display", "President bracelet", "Precious metals only", "Chromalight display", "Double aperture"),
        materials=("Yellow gold", "White gold", "Everose gold", "Platinum"),
        movements=("Cal. 3255",),
    ),
    WatchModel(
        brand="Rolex",
        model="Explorer",
        reference_numbers=("124270", "124273", "214270", "114270"),
        year_introduced=1953,
        price_range=(7500, 13000),
        key_features=("3-6-9 dial", "Simple design", "Oyster case", "Chromalight display", "36mm case", "Time-only"),
        materials=("Oystersteel", "Rolesor"),
        movements=("Cal. 3230", "Cal. 3132"),
    ),
    WatchModel(
        brand="Rolex",
        model="Sea-Dweller",
        reference_numbers=("126600", "126603", "136660", "116600", "1665"),
        year_introduced=1967,
        price_range=(13500, 20000),
        key_features=("Helium escape valve", "1220m water resistance", "No cyclops", "Red Sea-Dweller text", "43mm case", "Ceramic bezel"),
        materials=("Oystersteel", "Rolesor", "Yellow gold"),
        movements=("Cal. 3235", "Cal. 3135"),
    ),
    WatchModel(
        brand="Rolex",
        model="Deepsea",
        reference_numbers=("136660", "126660", "136668LB", "116660"),
        year_introduced=2008,
        price_range=(14000, 25000),
        key_features=("3900m water resistance", "Ringlock System", "Helium escape valve", "Extra thick case", "44mm case", "D-Blue dial", "RLX titanium back"),
        materials=("Oystersteel", "RLX titanium", "Yellow gold"),
        movements=("Cal. 3235", "Cal. 3135"),
    ),
    WatchModel(
        brand="Rolex",
        model="Yacht-Master",
        reference_numbers=("126622", "126621", "126655", "226658", "226659", "116622", "268622"),
        year_introduced=1992,
        price_range=(12000, 65000),
        key_features=("Rotatable bezel", "Nautical design", "Oysterflex strap option", "Polished bezel", "40mm/42mm sizes", "Bidirectional bezel"),
        materials=("Oystersteel", "Rolesor", "Everose gold", "Yellow gold", "White gold"),
        movements=("Cal. 3235", "Cal. 3135"),
    ),
    WatchModel(
        brand="Rolex",
        model="Sky-Dweller",
        reference_numbers=("336934", "336935", "336938", "336239", "336933", "326934", "326935", "326238"),
        year_introduced=2012,
        price_range=(17000, 58000),
        key_features=("Annual calendar", "Dual time zone", "Saros system", "Fluted ring command bezel", "42mm case", "Month display"),
        materials=("Oystersteel", "Rolesor", "Yellow gold", "White gold", "Everose gold"),
        movements=("Cal. 9002", "Cal. 9001"),
    ),
    WatchModel(
        brand="Rolex",
        model="Milgauss",
        reference_numbers=("116400GV", "116400"),
        year_introduced=1956,
        price_range=(9500, 12000),
        key_features=("Anti-magnetic", "Green sapphire crystal", "Lightning bolt hand", "1000 gauss resistance", "Z-Blue dial", "Scientific heritage"),
        materials=("Oystersteel",),
        movements=("Cal. 3131",),
    ),
    WatchModel(
        brand="Rolex",
        model="Air-King",
        reference_numbers=("126900", "116900"),
        year_introduced=1945,
        price_range=(7500, 8500),
        key_features=("Aviation heritage", "3-6-9 dial", "Chromalight display", "Oyster case", "40mm case", "Black dial"),
        materials=("Oystersteel",),
        movements=("Cal. 3230", "Cal. 3131"),
    ),
    WatchModel(
        brand="Rolex",
        model="Explorer II",
        reference_numbers=("226570", "226571", "216570"),
        year_introduced=1971,
        price_range=(10000, 14500),
        key_features=("24-hour hand", "Fixed bezel", "Cave exploration design", "Date window", "42mm case", "White/black dial options"),
        materials=("Oystersteel", "Rolesor"),
        movements=("Cal. 3285", "Cal. 3187"),
    ),
    WatchModel(
        brand="Rolex",
        model="Oyster Perpetual",
        reference_numbers=("124300", "126000", "277200", "124200", "277300"),
        year_introduced=1931,
        price_range=(6500, 9000),
        key_features=("No date", "Colorful dials", "Entry-level Rolex", "Simple design", "31mm/36mm/41mm sizes", "Bright dial colors"),
        materials=("Oystersteel",),
        movements=("Cal. 3230",),
    ),
    WatchModel(
        brand="Rolex",
        model="Perpetual 1908",
        reference_numbers=("52508", "52509", "52510", "52505"),
        year_introduced=2023,
        price_range=(25000, 38000),
        key_features=("Dress watch", "Thin profile", "Manual winding", "Small seconds", "Elegant design", "39mm case", "Domed crystal", "Leather strap"),
        materials=("Yellow gold", "White gold", "Platinum"),
        movements=("Cal. 7140",),
    ),
    WatchModel(
        brand="Rolex",
        model="Land-Dweller",
        reference_numbers=("127334", "127335", "127385TBR", "127386TBR", "127336", "127286TBR", "127234", "127236", "127235", "127285TBR", "M127334-0001", "M127335-0001", "M127385TBR-0001", "M127386TBR-0001", "M127336-0001", "M127286TBR-0001", "M127234-0001", "M127236-0001", "M127235-0001", "M127285TBR-0001"),
        year_introduced=2025,
        price_range=(14800, 93000),
        key_features=("36mm and 40mm case sizes", "Integrated bracelet design", "5 Hz high frequency movement", "Chromalight display", "32 patent applications", "18 model-exclusive patents", "Fluid case lines", "Modern elegance design", "Calibre 7135", "New Rolex 2025 collection"),
        materials=("Oystersteel", "White gold", "Platinum", "Everose gold"),
        movements=("Cal. 7135",),
    ),
    WatchModel(
        brand="Patek Philippe",
        model="Nautilus",
        reference_numbers=("5711/1A", "5712/1A", "5726/1A", "5980/1A", "5811/1A"),
        year_introduced=1976,
        price_range=(70000, 150000),
        key_features=("Porthole design", "Integrated bracelet", "Horizontal embossed dial"),
        materials=("Stainless steel", "White gold", "Rose gold"),
        movements=("Cal. 26-330 S C", "Cal. 324 S C"),
    ),
    WatchModel(
        brand="Patek Philippe",
        model="Aquanaut",
        reference_numbers=("5167A", "5168G", "5164A", "5968A", "5267A"),
        year_introduced=1997,
        price_range=(40000, 90000),
        key_features=("Rounded octagonal case", "Tropical composite strap", "Embossed dial"),
        materials=("Stainless steel", "White gold", "Rose gold"),
        movements=("Cal. 26-330 S C", "Cal. 324 S C"),
    ),
    WatchModel(
        brand="Patek Philippe",
        model="Calatrava",
        reference_numbers=("5196", "5227", "6119", "5296", "5116"),
        year_introduced=1932,
        price_range=(25000, 50000),
        key_features=("Simple round case", "Dress watch", "Minimalist design", "Officer case back"),
        materials=("White gold", "Rose gold", "Yellow gold", "Platinum"),
        movements=("Cal. 215 PS", "Cal. 324 S C"),
    ),
    WatchModel(
        brand="Audemars Piguet",
        model="Royal Oak",
        reference_numbers=("15400ST", "15500ST", "15202ST", "26331ST", "15510ST"),
        year_introduced=1972,
        price_range=(30000, 90000),
        key_features=("Octagonal bezel", "Integrated bracelet", "Tapisserie dial", "Exposed screws"),
        materials=("Stainless steel", "Rose gold", "White gold", "Titanium"),
        movements=("Cal. 3120", "Cal. 4302", "Cal. 2121"),
    ),
    WatchModel(
        brand="Audemars Piguet",
        model="Royal Oak Offshore",
        reference_numbers=("26470ST", "26400SO", "26238ST", "15710ST", "26420SO"),
        year_introduced=1993,
        price_range=(25000, 80000),
        key_features=("Large case", "Chronograph", "Rubber strap option", "Bold design"),
        materials=("Stainless steel", "Rose gold", "Titanium", "Ceramic"),
        movements=("Cal. 3126/3840", "Cal. 4404"),
    ),
    WatchModel(
        brand="Audemars Piguet",
        model="Code 11.59",
        reference_numbers=("15210OR", "15210BC", "26393BC", "26393OR"),
        year_introduced=2019,
        price_range=(35000, 100000),
        key_features=("Round case", "Sapphire crystal sides", "Modern design", "Multiple complications"),
        materials=("Rose gold", "White gold", "Stainless steel"),
        movements=("Cal. 4302", "Cal. 4401"),
    ),
    WatchModel(
        brand="Omega",
        model="Speedmaster Professional",
        reference_numbers=("310.30.42.50.01.001", "310.32.42.50.01.001", "311.30.42.30.01.005"),
        year_introduced=1957,
        price_range=(6000, 12000),
        key_features=("Moonwatch", "Chronograph", "Tachymeter bezel", "Hesalite crystal"),
        materials=("Stainless steel", "Gold", "Titanium"),
        movements=("Cal. 3861", "Cal. 1861"),
    ),
    WatchModel(
        brand="Omega",
        model="Seamaster 300M",
        reference_numbers=("210.30.42.20.01.001", "210.32.42.20.01.001", "210.90.42.20.01.001"),
        year_introduced=1993,
        price_range=(5000, 10000),
        key_features=("Helium escape valve", "Ceramic bezel", "Wave dial", "300m water resistance"),
        materials=("Stainless steel", "Gold", "Titanium", "Sedna gold"),
        movements=("Cal. 8800", "Cal. 8806"),
    ),
    WatchModel(
        brand="Omega",
        model="Constellation",
        reference_numbers=("131.10.29.20.52.001", "131.20.29.20.52.002", "131.25.29.20.52.002"),
        year_introduced=1952,
        price_range=(4000, 12000),
        key_features=("Griffes claws", "Star emblem", "Pie-pan dial", "Integrated bracelet"),
        materials=("Stainless steel", "Gold", "Sedna gold"),
        movements=("Cal. 8700", "Cal. 8800"),
    ),
    WatchModel(
        brand="Cartier",
        model="Santos",
        reference_numbers=("WSSA0029", "WSSA0018", "WSSA0030", "WGSA0007"),
        year_introduced=1904,
        price_range=(7000, 35000),
        key_features=("Square case", "Exposed screws", "Roman numerals", "Quick-change bracelet"),
        materials=("Stainless steel", "Gold", "Rose gold"),
        movements=("Cal. 1847 MC", "Cal. 9612 MC"),
    ),
    WatchModel(
        brand="Cartier",
        model="Tank",
        reference_numbers=("WSTA0041", "WSTA0052", "W5200003", "WGTA0041"),
        year_introduced=1917,
        price_range=(3500, 30000),
        key_features=("Rectangular case", "Roman numerals", "Railroad track minutes", "Blue sword hands"),
        materials=("Stainless steel", "Yellow gold", "Rose gold", "White gold"),
        movements=("Cal. 1847 MC", "Quartz"),
    ),
    WatchModel(
        brand="IWC",
        model="Pilot's Watch",
        reference_numbers=("IW377709", "IW327009", "IW377710", "IW389002"),
        year_introduced=1936,
        price_range=(5000, 15000),
        key_features=("Large crown", "Conical crown", "High contrast dial", "Anti-magnetic"),
        materials=("Stainless steel", "Bronze", "Titanium", "Ceramic"),
        movements=("Cal. 69380", "Cal. 32110"),
    ),
    WatchModel(
        brand="IWC",
        model="Portugieser",
        reference_numbers=("IW371605", "IW500710", "IW371617", "IW503501"),
        year_introduced=1939,
        price_range=(12000, 30000),
        key_features=("Large case", "Railway track dial", "Leaf hands", "Arabic numerals"),
        materials=("Stainless steel", "Rose gold", "White gold"),
        movements=("Cal. 79350", "Cal. 52010"),
    ),
    WatchModel(
        brand="Panerai",
        model="Luminor",
        reference_numbers=("PAM01312", "PAM01359", "PAM00524", "PAM01117"),
        year_introduced=1950,
        price_range=(6000, 25000),
        key_features=("Crown guard", "Cushion case", "Sandwich dial", "Large numerals"),
        materials=("Stainless steel", "Titanium", "Bronze", "Goldtech"),
        movements=("P.9010", "P.9000", "P.6000"),
    ),
    WatchModel(
        brand="TAG Heuer",
        model="Carrera",
        reference_numbers=("CBK2110", "CBN2A1A", "CV2A1AB", "CAR2A1W"),
        year_introduced=1963,
        price_range=(3000, 8000),
        key_features=("Chronograph", "Racing design", "Tachymeter scale", "Date window"),
        materials=("Stainless steel", "Gold", "Titanium"),
        movements=("Heuer 02", "Calibre 16"),
    ),
    WatchModel(
        brand="Breitling",
        model="Navitimer",
        reference_numbers=("A23322", "AB0127", "A17395", "AB0910"),
        year_introduced=1952,
        price_range=(7000, 15000),
        key_features=("Slide rule bezel", "Chronograph", "Aviation computer", "AOPA wings"),
        materials=("Stainless steel", "Gold", "Rose gold"),
        movements=("B01", "B23"),
    ),
    WatchModel(
        brand="Jaeger-LeCoultre",
        model="Reverso",
        reference_numbers=("Q3978480", "Q2548520", "Q3958420", "Q2788520"),
        year_introduced=1931,
        price_range=(6000, 50000),
        key_features=("Reversible case", "Art Deco design", "Swivel mechanism", "Rectangular case"),
        materials=("Stainless steel", "Rose gold", "White gold"),
        movements=("Cal. 854", "Cal. 822"),
    ),
    WatchModel(
        brand="Vacheron Constantin",
        model="Overseas",
        reference_numbers=("4500V", "7900V", "5500V", "2000V"),
        year_introduced=1996,
        price_range=(25000, 80000),
        key_features=("Integrated bracelet", "Quick-change strap", "Maltese cross bezel", "Sports luxury"),
        materials=("Stainless steel", "Rose gold", "White gold"),
        movements=("Cal. 5100", "Cal. 2460"),
    ),
    WatchModel(
        brand="A. Lange & Söhne",
        model="Lange 1",
        reference_numbers=("101.021", "191.032", "101.027", "191.039"),
        year_introduced=1994,
        price_range=(40000, 80000),
        key_features=("Asymmetric dial", "Outsized date", "Three-day power reserve", "German silver"),
        materials=("White gold", "Rose gold", "Yellow gold", "Platinum"),
        movements=("L121.1", "L901.0"),
    ),
    WatchModel(
        brand="Hublot",
        model="Big Bang",
        reference_numbers=("301.SB.131.RX", "411.NM.1170.RX", "301.PX.1180.RX"),
        year_introduced=2005,
        price_range=(12000, 25000),
        key_features=("Fusion concept", "Visible screws", "Rubber strap", "Skeleton dial"),
        materials=("Ceramic", "Titanium", "King Gold", "Carbon"),
        movements=("HUB1242", "HUB4100"),
    ),
    WatchModel(
        brand="Grand Seiko",
        model="Heritage",
        reference_numbers=("SBGR311", "SBGA413", "SBGM221", "SBGA211"),
        year_introduced=1960,
        price_range=(5000, 12000),
        key_features=("Zaratsu polishing", "Spring Drive", "Hand-finished", "Precision"),
        materials=("Stainless steel", "Titanium", "Platinum"),
        movements=("9S85", "9R65", "9S27"),
    ),
    WatchModel(
        brand="Tudor",
        model="Black Bay",
        reference_numbers=("79230N", "79230B", "79230R", "M79230N-0009"),
        year_introduced=2012,
        price_range=(3500, 5000),
        key_features=("Snowflake hands", "Domed crystal", "Rivet bracelet", "200m water resistance"),
        materials=("Stainless steel",),
        movements=("MT5602", "MT5612"),
    ),
    WatchModel(
        brand="Tudor",
        model="Pelagos",
        reference_numbers=("25600TN", "25600TB", "25407N", "M25407N-0001"),
        year_introduced=2012,
        price_range=(4000, 5500),
        key_features=("Titanium case", "500m water resistance", "Helium valve", "Ceramic bezel"),
        materials=("Titanium",),
        movements=("MT5612", "MT5400"),
    ),
)


def find_watch_by_reference(
    reference_number: str,
    catalog: tuple[WatchModel, ...] = LUXURY_WATCH_CATALOG,
) -> Optional[WatchModel]:
    """Return the first model whose references contain ``reference_number``."""
    needle = reference_number.strip().lower()
    if not needle:
        return None
    for watch in catalog:
        if any(needle in ref.lower() for ref in watch.reference_numbers):
            return watch
    return None


def find_watches_by_brand(
    brand: str,
    catalog: tuple[WatchModel, ...] = LUXURY_WATCH_CATALOG,
) -> list[WatchModel]:
    """Return every model of ``brand`` in catalog order."""
    target = brand.strip().lower()
    return [watch for watch in catalog if watch.brand.lower() == target]


__all__ = [
    "LUXURY_WATCH_CATALOG",
    "WatchModel",
    "find_watch_by_reference",
    "find_watches_by_brand",
]
