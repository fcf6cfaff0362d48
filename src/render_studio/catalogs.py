"""Static option catalogs mapping display labels to instruction fragments."""

import re

from render_studio.domain.catalogs import CatalogEntry
from render_studio.domain.selection import Axis
from render_studio.errors import ValidationError

FALLBACK_NAME = "Custom"

DESIGN_STYLES: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        "Modern",
        "Modern style with simple geometric forms, clean flat surfaces, sharp "
        "lines, open spaces, use of glass, steel and concrete, neutral tones, "
        "emphasizing functionality and natural light.",
    ),
    CatalogEntry(
        "Minimalist",
        "Minimalist style with clean layouts, removal of unnecessary details, "
        "basic geometric shapes, open space, a white, gray and black palette, "
        "natural materials, simplicity with elegance.",
    ),
    CatalogEntry(
        "Neoclassical",
        "Neoclassical style with balanced proportions, lightly decorated "
        "columns, refined molding, soft arch openings, white and cream tones, "
        "delivering elegance without excessive ornamentation.",
    ),
    CatalogEntry(
        "Scandinavian",
        "Scandinavian style with abundant natural light, light-toned wood, a "
        "white, beige and gray palette, warm minimalism, blending nature with "
        "functionality, clean and airy space.",
    ),
    CatalogEntry(
        "Industrial",
        "Industrial style with raw materials like concrete, exposed brick and "
        "steel; visible mechanical piping; gray, black and brown tones; "
        "industrial lighting; strong open-space character.",
    ),
    CatalogEntry(
        "Tropical",
        "Tropical style with abundant greenery, natural ventilation, sloped "
        "roofs or sun-shading louvers, bamboo, wood and stone materials, bright "
        "colors, optimized for hot and humid climates.",
    ),
    CatalogEntry(
        "Brutalism",
        "Brutalist style featuring bold architecture with raw exposed concrete, "
        "large angular masses, minimal ornamentation, dramatic light cuts "
        "through deep volumes, monumental presence.",
    ),
    CatalogEntry(
        "Futuristic",
        "Futuristic architectural style featuring smooth, curved forms with "
        "continuous flowing lines. The structures incorporate advanced "
        "materials such as smart glass, honeycomb polycarbonate panels, "
        "graphene glass, light-colored concrete, large glazing surfaces, and "
        "recessed LED strips in purple or warm yellow with RGB soft-glow "
        "effects. Vibrant OLED panels and bioluminescent materials highlight a "
        "strong high-tech aesthetic. The overall scene is bright, filled with "
        "natural light under a clear blue sky.",
    ),
)

BUILDING_TYPES: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        "Townhouse",
        "The front facade of a modern townhouse in an urban setting, narrow in "
        "width and multi-story. Built with gray concrete, large tempered glass "
        "panels, and vertical aluminum louvers for sun shading. Linear, clean "
        "architectural form emphasizing green spaces on balconies and "
        "skylights. Natural light flooding the interior.",
    ),
    CatalogEntry(
        "Villa",
        "Exterior perspective of a modern resort-style villa. The building has "
        "an L-shaped layout with large glass doors on all four sides, "
        "overlooking a swimming pool and lush garden. Main materials include "
        "natural stone cladding, outdoor wood, and a flat roof. Strong, "
        "minimalist architectural lines highlighting the connection between "
        "indoor and outdoor spaces.",
    ),
    CatalogEntry(
        "Apartment",
        "Interior of a modern condominium apartment. Open-plan layout "
        "connecting the living room, kitchen, and dining area. Dominant white "
        "tones with light-colored engineered wood furniture and wooden "
        "flooring. Natural light entering through large windows; layout "
        "optimized for comfort and space efficiency.",
    ),
    CatalogEntry(
        "Office",
        "Architecture of a modern high-rise office building. The facade "
        "consists of a unitized glass curtain wall reflecting the sky. Inside "
        "features an open-plan office layout with frosted glass partitions, "
        "raised floors, and gypsum ceilings. Professional lighting, flexible "
        "workspace, and industrial-grade materials.",
    ),
    CatalogEntry(
        "Restaurant",
        "Interior of a restaurant in Indochine style. High ceiling with woven "
        "rattan chandeliers, patterned encaustic tile flooring. Rich dark wood, "
        "rattan, and bamboo elements with traditional carved details. Warm and "
        "intimate layout, soft amber lighting creating a luxurious yet "
        "nostalgic atmosphere.",
    ),
    CatalogEntry(
        "Coffee Shop",
        "Design of an industrial-style coffee shop. Raw and rustic interior "
        "with exposed brick walls, visible ductwork, and polished concrete "
        "floors. Furniture made of metal and unfinished wood. Focused lighting "
        "over seating areas, creating intimate and distinctive corners.",
    ),
    CatalogEntry(
        "Kindergarten",
        "Facade and playground of a modern kindergarten. Soft building forms "
        "with bright, cheerful colors (yellow, green, red). Safe and "
        "child-friendly materials such as recycled plastic and natural wood. "
        "Plenty of natural light, open spaces connecting classrooms with the "
        "outdoor play area.",
    ),
    CatalogEntry(
        "Primary School",
        "Architecture of a primary school campus. Two- to three-story classroom "
        "blocks connected by wide, airy corridors. Basic materials such as "
        "brick, light-painted concrete, and metal or tiled roofs. Emphasis on "
        "spacious schoolyards paved with red tiles and shaded by large trees.",
    ),
    CatalogEntry(
        "Junior High School",
        "Architecture of a junior high school campus. Three-story classroom "
        "blocks connected by wide, airy corridors around a central courtyard. "
        "Basic materials such as brick, light-painted concrete, and metal or "
        "tiled roofs. Emphasis on a spacious schoolyard shaded by large trees.",
    ),
    CatalogEntry(
        "High School",
        "Architecture of a high school campus. Three- to four-story classroom "
        "blocks with specialist rooms, connected by wide, airy corridors. Basic "
        "materials such as brick, light-painted concrete, and metal or tiled "
        "roofs. Emphasis on a large schoolyard and sports ground shaded by "
        "large trees.",
    ),
    CatalogEntry(
        "International School",
        "Design of a modern, high-end international school. Bold architectural "
        "composition using extensive glass surfaces and premium aluminum "
        "cladding. Dedicated functional areas including advanced laboratories "
        "and indoor sports halls. Flexible learning environments with abundant "
        "natural light and eco-friendly materials.",
    ),
    CatalogEntry(
        "Provincial Government Headquarters",
        "Exterior perspective of a provincial government headquarters "
        "featuring large scale and strong civic symbolism. Balanced and "
        "monumental architectural massing with a wide, formal frontage. Uses "
        "modern materials such as large glass panels, stone cladding, and "
        "light-colored walls. The site includes an open plaza or landscaped "
        "axis leading to the main lobby. The overall composition expresses "
        "authority, transparency, and administrative identity.",
    ),
    CatalogEntry(
        "Local Government Office",
        "Architecture of a local government office with small-to-medium scale. "
        "Compact and straightforward massing prioritizing clarity and "
        "accessibility. The facade features light-colored walls, evenly "
        "arranged windows, and sheltered entrances. The layout emphasizes "
        "citizen friendliness, practicality, and operational efficiency.",
    ),
    CatalogEntry(
        "Administrative Center",
        "Overall perspective of an integrated administrative center featuring "
        "a large complex that consolidates multiple departments. Modern "
        "architectural massing with interconnected blocks linked through a "
        "central atrium or elevated walkways. Uses glass, metal, and clean "
        "planar surfaces to emphasize transparency and unity. Includes "
        "generous public zones and a clear circulation system.",
    ),
    CatalogEntry(
        "Public Building",
        "Architecture of a public government building designed to convey "
        "formality and stability. Clear and often symmetrical massing with a "
        "disciplined facade featuring large glass openings, solid wall "
        "surfaces, and a centrally emphasized main entrance. Durable materials "
        "such as stone, glass, and light metal finishes. The overall character "
        "reflects order, civic responsibility, and public service.",
    ),
)

CONTEXTS: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        "Urban",
        "Context: urban cityscape, surrounded by modern buildings, asphalt "
        "roads, reflective glass facades, dynamic urban energy.",
    ),
    CatalogEntry(
        "Suburban",
        "Context: suburban neighborhood, peaceful streets, green gardens, "
        "detached houses, soft lighting, community atmosphere.",
    ),
    CatalogEntry(
        "Rural",
        "Context: rural countryside, surrounded by open fields, trees, rustic "
        "materials, calm and serene mood.",
    ),
    CatalogEntry(
        "Coastal (Resort)",
        "Context: coastal resort setting, sea view, tropical palms, bright "
        "sunlight, breezy atmosphere, relaxing summer mood.",
    ),
    CatalogEntry(
        "Mountainous",
        "Context: mountainous landscape, pine forests, misty air, stone and "
        "timber materials, cozy alpine mood.",
    ),
    CatalogEntry(
        "Commercial",
        "Context: modern commercial area, high-rise offices, glass facades, LED "
        "lights, polished surfaces, professional urban vibe.",
    ),
)

LIGHTING: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        "Soft Sunrise",
        "Soft sunrise light with gentle pink-gold tones and clear morning "
        "atmosphere, illuminating the building.",
    ),
    CatalogEntry(
        "Midday (Clear Blue Sky)",
        "Bright midday light, clear blue sky, high contrast and crisp "
        "visibility.",
    ),
    CatalogEntry(
        "Golden Sunset",
        "Warm orange sunset light, long shadows and soft atmospheric glow.",
    ),
    CatalogEntry(
        "Evening (Interior Glow)",
        "Evening lighting with warm interior glow spilling outside and soft "
        "street lights.",
    ),
    CatalogEntry(
        "Late Night (Starry Sky)",
        "Late-night illumination, building lights on, starry sky with bright "
        "moon.",
    ),
)

WEATHER_OR_TIME: tuple[CatalogEntry, ...] = (
    CatalogEntry("Clear Sky", "Clear, cloudless weather."),
    CatalogEntry("Light Rain", "Light rain with wet, glistening streets."),
    CatalogEntry("Light Snow", "Light snowfall."),
    CatalogEntry(
        "Harsh Sun", "Harsh sunlight with strong, clearly defined shadows."
    ),
    CatalogEntry(
        "After Rain", "Just after the rain, with puddles and reflections."
    ),
)

VIEWS: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        "Front",
        "Frontal architectural render, symmetrical composition, clearly showing "
        "facade details with accurate proportions.",
    ),
    CatalogEntry(
        "Three-Quarter (3/4)",
        "Three-quarter render of the building, showing spatial perspective, "
        "natural light and architectural depth.",
    ),
    CatalogEntry(
        "High Angle",
        "High-angle render showing the whole building and surrounding "
        "landscape, with even and clear lighting.",
    ),
    CatalogEntry(
        "Bird's Eye",
        "Bird's-eye render placing the building within its district, dynamic "
        "perspective and natural light.",
    ),
    CatalogEntry(
        "Interior",
        "Interior render with light from windows or ceiling fixtures, clearly "
        "showing materials and spatial layout.",
    ),
)

CATALOGS: dict[Axis, tuple[CatalogEntry, ...]] = {
    Axis.STYLE: DESIGN_STYLES,
    Axis.BUILDING_TYPE: BUILDING_TYPES,
    Axis.CONTEXT: CONTEXTS,
    Axis.LIGHTING: LIGHTING,
    Axis.WEATHER_OR_TIME: WEATHER_OR_TIME,
    Axis.VIEW: VIEWS,
}


def short_name(label: str) -> str:
    """Strip parenthetical text and non-alphanumerics from a label."""
    return re.sub(r"[^a-zA-Z0-9]", "", label.split("(")[0].strip())


def fragment_for_label(axis: Axis, label: str) -> str | None:
    """Return the fragment for a label on an axis, if present."""
    for entry in CATALOGS[axis]:
        if entry.label == label:
            return entry.fragment
    return None


def entry_for_fragment(axis: Axis, fragment: str) -> CatalogEntry | None:
    """Return the catalog entry backing a fragment, if present."""
    for entry in CATALOGS[axis]:
        if entry.fragment == fragment:
            return entry
    return None


def reverse_lookup(axis: Axis, fragment: str) -> str:
    """Return the short identifier for a fragment, or the fallback name."""
    entry = entry_for_fragment(axis, fragment)
    if entry is None:
        return FALLBACK_NAME
    return short_name(entry.label) or FALLBACK_NAME


def resolve_option(axis: Axis, value: str) -> str:
    """Resolve a label or fragment to a fragment; empty clears the axis."""
    if not value:
        return ""
    fragment = fragment_for_label(axis, value)
    if fragment is not None:
        return fragment
    if entry_for_fragment(axis, value) is not None:
        return value
    raise ValidationError(f"Unknown {axis.value} option: {value!r}")
