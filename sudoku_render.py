# sudoku_render.py
"""
Rendu d'une partie en cours (PDF ou PNG) avec matplotlib.

- indices en noir, chiffres du joueur en couleur
- erreurs en rouge si l'option « montrer les erreurs » est active
- notes en petits chiffres dans les cases vides
"""

from __future__ import annotations
from dataclasses import replace
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from sudoku_game import PuzzleSnapshot, format_elapsed

TRIM_W_DEFAULT = 6.0
TRIM_H_DEFAULT = 9.0

DEFAULT_GIVEN_COLOR = "black"
DEFAULT_ADDED_COLOR = "#1f4fa8"
DEFAULT_MISTAKE_COLOR = "red"
DEFAULT_NOTE_COLOR = "#6b6b6b"

BLOCK_SHADE_COLOR = "#e9e9e9"   # gris clair
BLOCK_SHADE_ALPHA = 1.0        # 1.0 = opaque

DIFFICULTY_NAME_FR = {
    "easy": "facile",
    "medium": "moyen",
    "hard": "difficile",
    "expert": "expert",
}


# ---------- Dessin d'une grille ----------

def draw_board_at(
    ax,
    snapshot: PuzzleSnapshot,
    left: float,
    bottom: float,
    size: float,
    given_color: str = DEFAULT_GIVEN_COLOR,
    added_color: str = DEFAULT_ADDED_COLOR,
    mistake_color: str = DEFAULT_MISTAKE_COLOR,
    note_color: str = DEFAULT_NOTE_COLOR,
    show_notes: bool = True,
):
    cell = size / 9.0
    block = size / 3.0

    # --- Fond alterné par bloc 3x3 (style "échiquier" de blocs) ---
    for br in range(3):
        for bc in range(3):
            if (br + bc) % 2 == 0:
                ax.add_patch(
                    plt.Rectangle(
                        (left + bc * block, bottom + br * block),
                        block,
                        block,
                        facecolor=BLOCK_SHADE_COLOR,
                        edgecolor="none",
                        alpha=BLOCK_SHADE_ALPHA,
                        zorder=0,
                    )
                )

    ax.add_patch(
        plt.Rectangle((left, bottom), size, size, fill=False, linewidth=3, color="k", zorder=3)
    )

    for i in range(1, 9):
        lw = 2 if i % 3 == 0 else 0.8
        ax.plot([left + i * cell, left + i * cell], [bottom, bottom + size], linewidth=lw, color="k", zorder=2)
        ax.plot([left, left + size], [bottom + i * cell, bottom + i * cell], linewidth=lw, color="k", zorder=2)

    font_pts = cell * 0.5 * 72
    note_pts = font_pts * 0.3

    for r in range(9):
        for c in range(9):
            x0 = left + c * cell
            y0 = bottom + (8 - r) * cell
            val = snapshot.grid[r][c]

            if val != 0:
                if snapshot.given[r][c]:
                    color, weight = given_color, "normal"
                elif (r, c) in snapshot.wrong_cells:
                    color, weight = mistake_color, "bold"
                else:
                    color, weight = added_color, "bold"
                ax.text(
                    x0 + cell / 2,
                    y0 + cell * 0.47,
                    str(val),
                    ha="center",
                    va="center",
                    fontsize=font_pts,
                    fontweight=weight,
                    color=color,
                    zorder=4,
                )
            elif show_notes:
                # mini-grille 3x3 : 1 en haut à gauche, 9 en bas à droite
                for d in sorted(snapshot.notes[r][c]):
                    nr, nc = divmod(d - 1, 3)
                    ax.text(
                        x0 + (nc + 0.5) * cell / 3,
                        y0 + cell - (nr + 0.5) * cell / 3,
                        str(d),
                        ha="center",
                        va="center",
                        fontsize=note_pts,
                        color=note_color,
                        zorder=4,
                    )


def draw_game_page_figure(
    snapshot: PuzzleSnapshot,
    trim_w: float = TRIM_W_DEFAULT,
    trim_h: float = TRIM_H_DEFAULT,
    title: str = "Sudoku",
    show_notes: bool = True,
):
    plt.rcParams["font.family"] = "DejaVu Sans"
    fig = plt.figure(figsize=(trim_w, trim_h))
    ax = plt.gca()
    ax.set_xlim(0, trim_w)
    ax.set_ylim(0, trim_h)
    ax.axis("off")

    margin_x = 0.5
    size = trim_w - 2 * margin_x
    left = margin_x
    bottom = (trim_h - size) / 2

    draw_board_at(ax, snapshot, left, bottom, size, show_notes=show_notes)

    label = DIFFICULTY_NAME_FR.get(snapshot.difficulty or "", snapshot.difficulty or "")
    heading = f"{title} — Niveau {label}" if label else title
    ax.text(trim_w / 2, trim_h - 0.3, heading, ha="center", va="top", fontsize=12, fontweight="bold")

    status = f"Temps : {format_elapsed(snapshot.elapsed)} | Erreurs : {snapshot.mistakes}"
    if snapshot.won:
        status += " | Gagné"
    elif snapshot.solved:
        status += " | Résolu"
    ax.text(trim_w / 2, bottom - 0.2, status, ha="center", va="top", fontsize=9)

    return fig


# ---------- Export ----------

def blank_puzzle(snapshot: PuzzleSnapshot) -> PuzzleSnapshot:
    """Même partie réduite aux indices : ni chiffres du joueur, ni notes."""
    grid = tuple(
        tuple(v if snapshot.given[r][c] else 0 for c, v in enumerate(row))
        for r, row in enumerate(snapshot.grid)
    )
    notes = tuple(tuple(frozenset() for _ in row) for row in snapshot.notes)
    return replace(snapshot, grid=grid, notes=notes, wrong_cells=frozenset())


def export_game_pdf(
    snapshot: PuzzleSnapshot,
    output_path: str,
    title: str = "Sudoku",
    trim_w: float = TRIM_W_DEFAULT,
    trim_h: float = TRIM_H_DEFAULT,
    blank_copy: bool = False,
) -> str:
    """
    Écrit la partie dans un PDF. Avec `blank_copy`, ajoute une seconde page
    avec les seuls indices, pour rejouer la grille sur papier.
    """
    with PdfPages(output_path) as pdf:
        fig = draw_game_page_figure(snapshot, trim_w, trim_h, title=title)
        pdf.savefig(fig, bbox_inches="tight", dpi=300)
        plt.close(fig)

        if blank_copy:
            fig = draw_game_page_figure(blank_puzzle(snapshot), trim_w, trim_h, title=title, show_notes=False)
            pdf.savefig(fig, bbox_inches="tight", dpi=300)
            plt.close(fig)

    print(f"Export PDF : {output_path}")
    return output_path


def save_board_png(
    snapshot: PuzzleSnapshot,
    output_path: str,
    title: str = "Sudoku",
    dpi: int = 150,
    size_in: Optional[float] = None,
) -> str:
    trim_w = size_in if size_in is not None else TRIM_W_DEFAULT
    fig = draw_game_page_figure(snapshot, trim_w, trim_w + 1.2, title=title)
    fig.savefig(output_path, bbox_inches="tight", dpi=dpi)
    plt.close(fig)
    print(f"Export PNG : {output_path}")
    return output_path
