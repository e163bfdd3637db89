"""Render the watch catalog into the reference text sent with each analysis."""

from __future__ import annotations

from textwrap import dedent

from watchscan.knowledge.catalog import LUXURY_WATCH_CATALOG, WatchModel

_REFERENCES_PER_MODEL = 3

_RELEASE_NOTES = dedent(
    """\
    NEW 2025 RELEASES - THESE ARE REAL WATCHES:
    - ROLEX LAND-DWELLER (2025): Brand new Rolex model officially released in 2025. Features: integrated bracelet design, 36mm and 40mm case sizes, Cal. 7135 movement with 5 Hz high frequency, fluid case lines, modern elegance, Chromalight display.
      40mm References: 127334 (Oystersteel/white gold), 127335 (Everose gold), 127385TBR (Everose gold/diamonds), 127386TBR (Platinum/diamonds), 127336 (Platinum).
      36mm References: 127234 (Oystersteel/white gold), 127235 (Everose gold), 127285TBR (Everose gold/diamonds), 127286TBR (Platinum/diamonds), 127236 (Platinum).
      Price range: €14,800-€93,150. THIS IS A LEGITIMATE ROLEX MODEL - NOT FAKE.

    Key identification features:
    - Rolex: Oyster case, Mercedes hands, Cyclops date magnifier, ceramic bezels (modern), crown logo at 12
    - Rolex Land-Dweller (2025): Integrated bracelet, fluid case lines, modern elegance, no cyclops, 5 Hz movement
    - Patek Philippe: Calatrava cross logo, intricate finishing, porthole design (Nautilus), tropical strap (Aquanaut)
    - Audemars Piguet: Octagonal bezel, tapisserie dial, integrated bracelet, exposed screws
    - Omega: Hippocampus logo, wave dial patterns (Seamaster), Moonwatch history (Speedmaster)
    - Cartier: Blue cabochon crown, Roman numerals, railroad track minutes, Art Deco design
    - IWC: Large conical crown, railway track dial (Portugieser), pilot design language
    - Panerai: Crown guard, sandwich dial, large cushion case, California dial
    - Grand Seiko: Zaratsu polishing, perfect dial finishing, Spring Drive smooth sweep

    Current market trends (2024-2025):
    - Rolex Land-Dweller (NEW 2025): €14,800-€93,150 (40mm refs: 127334, 127335, 127385TBR, 127386TBR, 127336) (36mm refs: 127234, 127235, 127285TBR, 127286TBR, 127236)
    - Rolex Submariner 126610LN: $12,000-$15,000
    - Patek Nautilus 5711/1A (discontinued): $80,000-$150,000
    - AP Royal Oak 15500ST: $45,000-$75,000
    - Omega Speedmaster Professional: $6,000-$8,000
    """
)


def _describe_model(watch: WatchModel) -> str:
    refs = [ref for ref in watch.reference_numbers[:_REFERENCES_PER_MODEL] if ref]
    ref_text = ", ".join(refs) if refs else "refs: n/a"
    return f"{watch.model} ({ref_text})"


def build_knowledge_context(
    catalog: tuple[WatchModel, ...] = LUXURY_WATCH_CATALOG,
) -> str:
    """Return the catalog summary injected into the analysis prompt.

    Brands appear in the order they are first listed in ``catalog`` so the
    output is stable for a given catalog.
    """
    by_brand: dict[str, list[WatchModel]] = {}
    for watch in catalog:
        by_brand.setdefault(watch.brand, []).append(watch)

    brand_lines = [
        f"{brand}: " + ", ".join(_describe_model(watch) for watch in models)
        for brand, models in by_brand.items()
    ]
    return (
        "LUXURY WATCH DATABASE (2025 Updated):\n\n"
        + "\n\n".join(brand_lines)
        + "\n\n"
        + _RELEASE_NOTES
    )


__all__ = ["build_knowledge_context"]
