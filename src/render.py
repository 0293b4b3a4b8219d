"""
Render Utilities

Text and image rendering of boards, flood regions and solution reports.
"""

from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageDraw

from src.solver import Board, CoverageMask, SolutionReport


# One glyph per colour id
SYMBOLS = "-#NoTv"

# Fill colours for image output, indexed by colour id
PALETTE = [
    "#e53935",  # Red
    "#1e88e5",  # Blue
    "#43a047",  # Green
    "#fdd835",  # Yellow
    "#8e24aa",  # Purple
    "#fb8c00",  # Orange
]

DEFAULT_CELL_SIZE = 24
COVERED_OUTLINE = "white"


def symbol(colour: int) -> str:
    """
    Get the printable glyph for a colour id.

    Raises:
        ValueError: If the colour has no glyph
    """
    if not 0 <= colour < len(SYMBOLS):
        raise ValueError(f"No symbol for colour {colour}")
    return SYMBOLS[colour]


def render_legend(num_colours: int) -> str:
    """One "<id>: <glyph>" line per colour."""
    return "\n".join(f"{colour}: {symbol(colour)}" for colour in range(num_colours))


def render_board(board: Board) -> str:
    """Board as text, one line per row."""
    return "\n".join(
        "".join(symbol(colour) for colour in row) for row in board.to_list()
    )


def render_mask(mask: CoverageMask, width: int) -> str:
    """Flood region as text: X for covered cells, . otherwise."""
    grid = mask.to_array(width)
    return "\n".join(
        "".join("X" if covered else "." for covered in row) for row in grid
    )


def format_report(report: SolutionReport) -> str:
    """
    Format an improving solution as "<length>: <glyphs> (<queued>)".

    Args:
        report: Solution report from a strategy

    Returns:
        Single-line summary
    """
    glyphs = "".join(symbol(colour) for colour in report.moves)
    return f"{report.length}: {glyphs} ({report.queue_size})"


def save_board_image(
    board: Board,
    path: Union[str, Path],
    mask: Optional[CoverageMask] = None,
    cell_size: int = DEFAULT_CELL_SIZE
) -> Path:
    """
    Save the board as a PNG, outlining covered cells when a mask is given.

    Args:
        board: Board to draw
        path: Output file path (parent directories are created)
        mask: Optional flood region to highlight
        cell_size: Pixel size of each cell

    Returns:
        Path the image was written to
    """
    if board.num_colours > len(PALETTE):
        raise ValueError(f"Palette has {len(PALETTE)} colours, board uses {board.num_colours}")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    image = Image.new("RGB", (board.width * cell_size, board.height * cell_size), "black")
    draw = ImageDraw.Draw(image)

    covered = mask.to_array(board.width) if mask is not None else None

    for y, row in enumerate(board.to_list()):
        for x, colour in enumerate(row):
            box = [x * cell_size, y * cell_size,
                   (x + 1) * cell_size - 1, (y + 1) * cell_size - 1]
            draw.rectangle(box, fill=PALETTE[colour])
            if covered is not None and covered[y, x]:
                draw.rectangle(box, outline=COVERED_OUTLINE, width=2)

    image.save(path, "PNG")
    return path
