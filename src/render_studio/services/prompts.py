"""Prompt composition for the three render strategies."""

from render_studio.domain.rendering import RenderStrategy
from render_studio.domain.selection import Selection

HUMAN_INSTRUCTION = (
    "The image must include real people with natural appearance, gestures and "
    "movement; never 3D characters, cartoons or anime figures. Their "
    "expressions must be genuine and calm, in harmony with the architectural "
    "space and the lighting."
)

QUALITY_INSTRUCTION = (
    "Render with ultra-photorealistic quality, 8K resolution, sharp focus, "
    "detailed textures, and cinematic lighting, similar to a professional V-Ray "
    "or Corona render. The image must be high-resolution enough to allow "
    "zooming in to see fine details clearly."
)

MATERIAL_CONSISTENCY_INSTRUCTION = (
    "**MATERIAL CONSISTENCY MANDATE:** The whole building must follow one "
    "unified material design language. The main architectural volumes of the "
    "building must share the same dominant material palette. It is STRICTLY "
    "FORBIDDEN to apply entirely different main material sets to different "
    "volumes (for example, volume A in concrete and glass while volume B is "
    "clad in wood and brick). Material consistency is mandatory."
)

_FULL_RENDER_INSTRUCTION = """
**ABSOLUTE MANDATE: PRESERVE THE ORIGINAL ARCHITECTURE.**
- **100% COMPLIANCE:** Keep the massing, proportions, layout, position and number of every architectural element (windows, balconies, roofs, columns, walls) from the provided sketch exactly as drawn.
- **STRICTLY FORBIDDEN:** Do not add, remove, move or resize any architectural element. Any creative change to the structure is prohibited.
- **MAIN TASK:** Focus on "coloring" and "completing" the sketch. Apply materials, colors, landscape and lighting as requested to produce a vivid, photorealistic render.
""".strip()


def select_strategy(selection: Selection, *, style_locked: bool) -> RenderStrategy:
    """Pick the generation strategy for a request, first match wins."""
    if style_locked:
        return RenderStrategy.STYLE_LOCKED_TRANSFER
    if (
        not selection.style
        and not selection.building_type
        and selection.has_environment()
    ):
        return RenderStrategy.REFINEMENT_ONLY
    return RenderStrategy.FULL_RENDER


def compose_style_transfer(
    selection: Selection, free_text: str, locked_prompt: str = ""
) -> str:
    """Build the instruction for transferring a locked style onto a sketch."""
    requirements = _join([free_text, *selection.environment_fragments()])
    reference_notes = (
        f"\n    Reference style notes: {locked_prompt}" if locked_prompt else ""
    )
    return f"""
**TASK: ARCHITECTURAL STYLE TRANSFER**

**SOURCES:**
1.  **STYLE IMAGE (Image 1 - Reference):** This image holds the STYLE, MATERIALS, LIGHTING and COLORS to copy.{reference_notes}
2.  **SKETCH IMAGE (Image 2 - Target):** This image holds the architectural MASSING, LAYOUT and PROPORTIONS that must be PRESERVED INTACT.

**MANDATES:**
1.  **KEEP THE GEOMETRY:** Re-render **the Sketch Image (Image 2)**. NEVER change any architectural detail: massing, layout, window positions, balconies, roofs. The structure of Image 2 is immutable.
2.  **APPLY THE STYLE:** Take the ENTIRE style of **the Style Image (Image 1)**, including materials (concrete, wood, glass), colors, quality of light (sun direction, harshness) and overall atmosphere, and apply it to the massing of Image 2.
3.  **DO NOT MIX ARCHITECTURE:** It is STRICTLY FORBIDDEN to copy any ARCHITECTURAL ELEMENT from Image 1 into Image 2. Copy only the style "skin", never the "structure".
4.  **MATERIAL CONSISTENCY:** The material palette from Image 1 must be applied uniformly across ALL architectural volumes of Image 2. The whole building must share one unified material design language.
5.  **FINAL RESULT:** A photorealistic render of the architecture in Image 2 carrying 100% of the style of Image 1, as if both images were two views of the same building.
6.  **ADDITIONAL USER REQUIREMENTS:** {_sentence(requirements)}{HUMAN_INSTRUCTION}
7.  **IMAGE QUALITY:** {QUALITY_INSTRUCTION}
""".strip()


def compose_refinement(selection: Selection, free_text: str) -> str:
    """Build the instruction for changing only the surroundings of a photo."""
    details = _join([free_text, *selection.environment_fragments()])
    return (
        "**ENVIRONMENT REFINEMENT MANDATE:** Keep 100% of the architecture, "
        "materials and colors of the building in the original image. Change "
        "only the surrounding environment according to the following "
        f"requirements: {_sentence(details)}{HUMAN_INSTRUCTION} "
        "The result must be a photorealistic image showing the original "
        "building in a new setting."
        f"\n\n**IMAGE QUALITY:** {QUALITY_INSTRUCTION}"
    )


def compose_full_render(selection: Selection, free_text: str) -> str:
    """Build the instruction for coloring and completing a line sketch."""
    request = _join([free_text, *selection.fragments()])
    return (
        f"{_FULL_RENDER_INSTRUCTION}\n\n"
        f"{MATERIAL_CONSISTENCY_INSTRUCTION}\n\n"
        f"**SPECIFIC REQUIREMENTS:** {_sentence(request)}{HUMAN_INSTRUCTION}\n\n"
        f"**IMAGE QUALITY:** {QUALITY_INSTRUCTION}"
    )


def _join(parts: list[str]) -> str:
    cleaned = (part.replace(".,", ",").strip().rstrip(".").rstrip() for part in parts)
    return ", ".join(part for part in cleaned if part)


def _sentence(text: str) -> str:
    return f"{text}. " if text else ""
