#!/usr/bin/env python3
"""
Terminal and image rendering of palette orderings and harmony sets.

Text renderers return strings; the CLI decides where they go.
"""

from PIL import Image, ImageDraw

from analyze import (
    LUMA_WEIGHTS, color_name, greyscale, hsv, luminance, similarity_group, temperature,
)
from palette import GRAYSCALE, band, in_cube, rgb_cube, to_hex, xterm_rgb


# =============================================================================
# Constants
# =============================================================================

ESC = "\x1b"
RESET = f"{ESC}[0m"

ROW_SIZE = 6  # Colours per row
BLOCK_SIZE = 36  # Colours per cube block

SWATCH_SIZE = 40
PADDING = 8
TEXT_HEIGHT = 14
LABEL_WIDTH = 170
BACKGROUND = (240, 240, 240)


# =============================================================================
# Terminal Cells
# =============================================================================

def colour_cell(index: int, foreground: bool = False) -> str:
    """One escape-coded cell: the index on its colour, or in its colour."""
    if foreground:
        return f"{ESC}[38;5;{index}m  |{index:03d}|{RESET}"
    return f"{ESC}[48;5;{index}m  {index:03d}  {RESET}"


def render_cells(indices) -> str:
    """Background cells for indices, then the same indices as foreground."""
    background = "".join(colour_cell(i) for i in indices)
    foreground = "".join(colour_cell(i, foreground=True) for i in indices)
    return background + foreground


def render_system_colours() -> str:
    """The 16 system colours: extremes first, then the chromatic six of each."""
    lines = [
        render_cells([0, 7]),
        render_cells([8, 15]),
        "",
        render_cells(range(1, 7)),
        render_cells(range(9, 15)),
        "",
    ]
    return "\n".join(lines)


def render_rows(indices) -> str:
    """Rows of six, with a blank line after each block of 36."""
    indices = list(indices)
    lines = []
    for start in range(0, len(indices), ROW_SIZE):
        lines.append(render_cells(indices[start:start + ROW_SIZE]))
        if (start + ROW_SIZE) % BLOCK_SIZE == 0:
            lines.append("")
    return "\n".join(lines)


def render_palette(cube_order) -> str:
    """Full palette with the cube band in the given order."""
    return "\n".join([
        render_system_colours(),
        render_rows(cube_order),
        render_rows(GRAYSCALE),
    ])


def render_harmonies(harmonies) -> str:
    """Labelled harmony groups. Sets with a single colour are left out."""
    lines = []
    for harmony in harmonies:
        if harmony.is_degenerate:
            continue
        lines.append(f"{harmony.name} ({len(harmony)} colours):")
        lines.append(render_cells(harmony.colors))
        lines.append("")
    return "\n".join(lines)


# =============================================================================
# Description
# =============================================================================

def render_description(index: int) -> str:
    """Prose report of one palette index."""
    lines = []
    colour_band = band(index)

    lines.append(f"COLOUR {index:03d}  {render_cells([index])}")
    lines.append(f"  Band: {colour_band.value}")
    lines.append(f"  Hex: {to_hex(index)} | RGB: {xterm_rgb(index)}")

    if in_cube(index):
        hue, saturation, value = hsv(index)
        lines.append(f"  Name: {color_name(index)}")
        lines.append(f"  Cube: {rgb_cube(index)}")
        lines.append(f"  HSV: ({hue:.0f}°, {saturation:.2f}, {value:.2f})")
        lines.append(f"  Luminance: {luminance(index):.3f} | Greyscale: {greyscale(index):.3f}")
        lines.append(f"  Temperature: {temperature(index).name.lower()} | "
                     f"Similarity group: {similarity_group(index)}")

    return "\n".join(lines)


# =============================================================================
# Swatch Image
# =============================================================================

def text_color_for_background(index: int) -> tuple:
    """Return black or white text color based on background brightness."""
    r, g, b = xterm_rgb(index)
    wr, wg, wb = LUMA_WEIGHTS
    return (0, 0, 0) if wr * r + wg * g + wb * b > 128 else (255, 255, 255)


def visualize_rows(rows: list, output_path: str) -> None:
    """
    Save a swatch sheet: one labelled row of swatches per entry.

    Args:
        rows: List of (label, indices) pairs
        output_path: Path to save the PNG image
    """
    max_cols = max((len(indices) for _, indices in rows), default=1)
    img_width = LABEL_WIDTH + max_cols * (SWATCH_SIZE + PADDING) + PADDING
    img_height = len(rows) * (SWATCH_SIZE + PADDING) + PADDING

    img = Image.new('RGB', (img_width, max(img_height, SWATCH_SIZE)), BACKGROUND)
    draw = ImageDraw.Draw(img)

    for row, (label, indices) in enumerate(rows):
        y = PADDING + row * (SWATCH_SIZE + PADDING)
        draw.text((PADDING, y + SWATCH_SIZE // 2 - TEXT_HEIGHT // 2), label, fill=(0, 0, 0))

        for col, index in enumerate(indices):
            x = LABEL_WIDTH + col * (SWATCH_SIZE + PADDING)
            draw.rectangle([x, y, x + SWATCH_SIZE, y + SWATCH_SIZE], fill=xterm_rgb(index))

            # Center index on swatch
            text = f"{index:03d}"
            bbox = draw.textbbox((0, 0), text)
            text_width = bbox[2] - bbox[0]
            text_x = x + (SWATCH_SIZE - text_width) // 2
            draw.text((text_x, y + SWATCH_SIZE // 2 - 5), text,
                      fill=text_color_for_background(index))

    img.save(output_path)


def palette_rows(cube_order) -> list:
    """Swatch rows for a full palette listing."""
    cube_order = list(cube_order)
    rows = [("system", list(range(0, 8))), ("high-intensity", list(range(8, 16)))]
    for start in range(0, len(cube_order), ROW_SIZE):
        rows.append((f"cube {start // ROW_SIZE + 1}", cube_order[start:start + ROW_SIZE]))
    grays = list(GRAYSCALE)
    for start in range(0, len(grays), ROW_SIZE):
        rows.append((f"grayscale {start // ROW_SIZE + 1}", grays[start:start + ROW_SIZE]))
    return rows


def harmony_rows(harmonies) -> list:
    """Swatch rows for the non-degenerate harmony sets."""
    return [(h.name, list(h.colors)) for h in harmonies if not h.is_degenerate]
