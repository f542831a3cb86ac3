# sudoku_gui.py
"""
Interface CustomTkinter pour jouer au Sudoku :
grille 9x9, pavé numérique avec chiffres restants, notes, annulation,
indice, vérification, solution, pause et export PDF.

Toute la logique vit dans GameInstance ; ici on ne fait qu'afficher
l'instantané après chaque action.
"""

from __future__ import annotations
import os

import customtkinter as ctk
from tkinter import messagebox

from sudoku_difficulty import PROFILES, DEFAULT_DIFFICULTY
from sudoku_game import (
    GameInstance,
    PuzzleSnapshot,
    format_elapsed,
    NOTICE_NO_SELECTION,
    NOTICE_GIVEN_CELL,
    NOTICE_MISTAKE,
    NOTICE_PAUSED,
    NOTICE_FINISHED,
    NOTICE_NOTHING_TO_UNDO,
    NOTICE_BOARD_FULL,
    NOTICE_HINT,
    NOTICE_WON,
    NOTICE_SOLVED,
)
from sudoku_render import export_game_pdf

# ---------------------------
# Libellés FR pour l'UI
# ---------------------------
DIFF_KEY_TO_LABEL_FR = {
    "easy": "facile",
    "medium": "moyen",
    "hard": "difficile",
    "expert": "expert",
}
DIFF_LABEL_FR_TO_KEY = {v: k for k, v in DIFF_KEY_TO_LABEL_FR.items()}


def diff_key_to_label_fr(key: str) -> str:
    return DIFF_KEY_TO_LABEL_FR.get(key, key)


def diff_label_fr_to_key(label: str) -> str:
    return DIFF_LABEL_FR_TO_KEY.get(label, label)


NOTICE_MESSAGES_FR = {
    NOTICE_NO_SELECTION: "Choisis d'abord une case.",
    NOTICE_GIVEN_CELL: "Impossible de modifier un indice !",
    NOTICE_MISTAKE: "Hmm... ce n'est pas ça.",
    NOTICE_PAUSED: "Partie en pause.",
    NOTICE_FINISHED: "Partie terminée : lance une nouvelle partie.",
    NOTICE_NOTHING_TO_UNDO: "Rien à annuler.",
    NOTICE_BOARD_FULL: "Plus aucune case vide.",
    NOTICE_HINT: "Et voilà un indice.",
    NOTICE_WON: "Bravo, grille terminée ! 🎉",
    NOTICE_SOLVED: "Solution affichée.",
}

# Couleurs des cases
CELL_BG = "#ffffff"
CELL_BG_ALT = "#e9e9e9"
CELL_SELECTED = "#9ec5fe"
CELL_AREA = "#dbe7fb"
CELL_SAME = "#c8f0c8"
CELL_ERROR = "#f8c0c0"
TEXT_GIVEN = "black"
TEXT_ADDED = "#1f4fa8"
TEXT_NOTE = "#6b6b6b"
TEXT_MISTAKE = "red"

CELL_SIZE = 48
TIMER_TICK_MS = 1000


def _notes_text(digits) -> str:
    rows = []
    for base in (1, 4, 7):
        rows.append(" ".join(str(d) if d in digits else " " for d in range(base, base + 3)))
    return "\n".join(rows)


def launch_gui():
    ctk.set_appearance_mode("light")
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title("Sudoku")

    game = GameInstance(difficulty=None)

    difficulty_var = ctk.StringVar(value=diff_key_to_label_fr(DEFAULT_DIFFICULTY))
    status_var = ctk.StringVar(value="Prêt.")
    timer_var = ctk.StringVar(value="00:00")
    mistakes_var = ctk.StringVar(value="0 erreur")
    auto_notes_var = ctk.BooleanVar(value=False)
    show_mistakes_var = ctk.BooleanVar(value=False)

    digit_font = ctk.CTkFont(size=22, weight="bold")
    given_font = ctk.CTkFont(size=22)
    note_font = ctk.CTkFont(size=9)

    # ----- Barre du haut -----
    frame_top = ctk.CTkFrame(app)
    frame_top.grid(row=0, column=0, padx=10, pady=(10, 5), sticky="ew")

    ctk.CTkLabel(frame_top, text="Niveau").grid(row=0, column=0, padx=5, pady=5)
    ctk.CTkOptionMenu(
        frame_top,
        values=[diff_key_to_label_fr(k) for k in PROFILES.keys()],
        variable=difficulty_var,
        command=lambda _label: on_new_game(),
    ).grid(row=0, column=1, padx=5, pady=5)

    ctk.CTkButton(frame_top, text="Nouvelle partie", command=lambda: on_new_game()).grid(
        row=0, column=2, padx=5, pady=5
    )
    timer_button = ctk.CTkButton(
        frame_top, textvariable=timer_var, width=70, command=lambda: on_pause()
    )
    timer_button.grid(row=0, column=3, padx=5, pady=5)
    ctk.CTkLabel(frame_top, textvariable=mistakes_var).grid(row=0, column=4, padx=5, pady=5)

    # ----- Grille -----
    frame_board = ctk.CTkFrame(app, fg_color="black")
    frame_board.grid(row=1, column=0, padx=10, pady=5)

    cells = []
    for r in range(9):
        row_buttons = []
        for c in range(9):
            btn = ctk.CTkButton(
                frame_board,
                text="",
                width=CELL_SIZE,
                height=CELL_SIZE,
                corner_radius=0,
                border_width=0,
                command=lambda rr=r, cc=c: on_select(rr, cc),
            )
            # espace plus large entre les blocs 3x3
            padx = (3 if c % 3 == 0 else 1, 0)
            pady = (3 if r % 3 == 0 else 1, 0)
            btn.grid(row=r, column=c, padx=padx, pady=pady)
            row_buttons.append(btn)
        cells.append(row_buttons)

    # ----- Pavé numérique -----
    frame_keypad = ctk.CTkFrame(app)
    frame_keypad.grid(row=2, column=0, padx=10, pady=5, sticky="ew")

    keypad = {}
    for i, d in enumerate(range(1, 10)):
        btn = ctk.CTkButton(
            frame_keypad, text=f"{d}\n9", width=44, height=52, command=lambda dd=d: on_digit(dd)
        )
        btn.grid(row=0, column=i, padx=2, pady=5)
        keypad[d] = btn

    # ----- Outils -----
    frame_tools = ctk.CTkFrame(app)
    frame_tools.grid(row=3, column=0, padx=10, pady=5, sticky="ew")

    undo_button = ctk.CTkButton(frame_tools, text="Annuler", width=80, command=lambda: on_undo())
    undo_button.grid(row=0, column=0, padx=3, pady=5)
    ctk.CTkButton(frame_tools, text="Effacer", width=80, command=lambda: on_digit(0)).grid(
        row=0, column=1, padx=3, pady=5
    )
    note_button = ctk.CTkButton(frame_tools, text="Notes", width=80, command=lambda: on_note_mode())
    note_button.grid(row=0, column=2, padx=3, pady=5)
    ctk.CTkButton(frame_tools, text="Indice", width=80, command=lambda: on_hint()).grid(
        row=0, column=3, padx=3, pady=5
    )
    ctk.CTkButton(frame_tools, text="Vérifier", width=80, command=lambda: on_check()).grid(
        row=1, column=0, padx=3, pady=5
    )
    ctk.CTkButton(frame_tools, text="Solution", width=80, command=lambda: on_solve()).grid(
        row=1, column=1, padx=3, pady=5
    )
    ctk.CTkButton(frame_tools, text="Export PDF", width=80, command=lambda: on_export()).grid(
        row=1, column=2, padx=3, pady=5
    )

    ctk.CTkSwitch(
        frame_tools,
        text="Notes auto",
        variable=auto_notes_var,
        command=lambda: refresh(game.set_auto_notes(auto_notes_var.get())),
    ).grid(row=2, column=0, columnspan=2, padx=3, pady=5, sticky="w")
    ctk.CTkSwitch(
        frame_tools,
        text="Montrer les erreurs",
        variable=show_mistakes_var,
        command=lambda: refresh(game.set_show_mistakes(show_mistakes_var.get())),
    ).grid(row=2, column=2, columnspan=2, padx=3, pady=5, sticky="w")

    # ----- Bas -----
    status_label = ctk.CTkLabel(app, textvariable=status_var, anchor="w")
    status_label.grid(row=4, column=0, padx=10, pady=(0, 10), sticky="ew")

    # ==========================
    #   AFFICHAGE
    # ==========================

    def cell_background(snap: PuzzleSnapshot, r: int, c: int) -> str:
        sel = snap.selected
        if sel == (r, c):
            return CELL_SELECTED
        if (r, c) in snap.wrong_cells or snap.error_cell == (r, c):
            return CELL_ERROR
        if sel is not None:
            sr, sc = sel
            sel_val = snap.grid[sr][sc]
            if sel_val and snap.grid[r][c] == sel_val:
                return CELL_SAME
            if sr == r or sc == c or (sr // 3, sc // 3) == (r // 3, c // 3):
                return CELL_AREA
        return CELL_BG_ALT if ((r // 3) + (c // 3)) % 2 == 0 else CELL_BG

    def refresh(snap: PuzzleSnapshot):
        for r in range(9):
            for c in range(9):
                btn = cells[r][c]
                val = snap.grid[r][c]
                bg = cell_background(snap, r, c)
                if val:
                    if snap.given[r][c]:
                        color, font = TEXT_GIVEN, given_font
                    elif (r, c) in snap.wrong_cells:
                        color, font = TEXT_MISTAKE, digit_font
                    else:
                        color, font = TEXT_ADDED, digit_font
                    text = str(val)
                else:
                    color, font = TEXT_NOTE, note_font
                    text = _notes_text(snap.notes[r][c]) if snap.notes[r][c] else ""
                btn.configure(text=text, text_color=color, font=font, fg_color=bg, hover_color=bg)

        for d, btn in keypad.items():
            rem = snap.remaining[d]
            btn.configure(text=f"{d}\n{rem}", state="disabled" if rem <= 0 else "normal")

        plural = "s" if snap.mistakes > 1 else ""
        mistakes_var.set(f"{snap.mistakes} erreur{plural}")
        undo_button.configure(state="normal" if snap.can_undo else "disabled")
        note_button.configure(text="Notes ✓" if snap.note_mode else "Notes")

        if snap.notice:
            status_var.set(NOTICE_MESSAGES_FR.get(snap.notice, snap.notice))

        if snap.notice == NOTICE_WON:
            on_won(snap)

    # ==========================
    #   ACTIONS
    # ==========================

    def on_new_game():
        key = diff_label_fr_to_key(difficulty_var.get())
        status_var.set("Génération de la grille...")
        app.update_idletasks()
        snap = game.new_game(key)
        print(f"Nouvelle partie : {diff_key_to_label_fr(key)}")
        status_var.set(f"Nouvelle partie ({diff_key_to_label_fr(key)}).")
        refresh(snap)

    def on_select(r: int, c: int):
        if game.stats.paused:
            return
        refresh(game.select_cell(r, c))

    def on_digit(d: int):
        refresh(game.input_digit(d))

    def on_note_mode():
        snap = game.toggle_note_mode()
        status_var.set("Mode notes activé." if snap.note_mode else "Mode notes désactivé.")
        refresh(snap)

    def on_undo():
        refresh(game.undo())

    def on_hint():
        refresh(game.hint())

    def on_check():
        result = game.check_board()
        if result.mistake_count:
            status_var.set(f"{result.mistake_count} erreur(s) sur la grille.")
        else:
            status_var.set("Rien à signaler pour l'instant !")

    def on_solve():
        if not messagebox.askyesno("Solution", "Vraiment ? Tu abandonnes ?"):
            return
        refresh(game.solve())

    def on_pause():
        if game.finished:
            return
        game.pause()
        messagebox.showinfo("Pause", "On fait une pause ?\nOK pour reprendre.")
        refresh(game.resume())

    def on_won(snap: PuzzleSnapshot):
        print(f"Partie gagnée en {format_elapsed(snap.elapsed)} ({snap.mistakes} erreur(s))")
        if messagebox.askyesno(
            "Bravo ! 🎉",
            f"Temps : {format_elapsed(snap.elapsed)} | Erreurs : {snap.mistakes}\n\nNouvelle partie ?",
        ):
            app.after(10, on_new_game)

    def on_export():
        try:
            snap = game.snapshot()
            output_file = f"sudoku_{snap.difficulty or 'partie'}.pdf"
            export_game_pdf(snap, output_file, blank_copy=True)
            abs_path = os.path.abspath(output_file)
            status_var.set(f"✅ PDF généré : {output_file}")
            messagebox.showinfo("Terminé", f"PDF généré :\n{abs_path}")
        except Exception as e:
            status_var.set("❌ Erreur lors de l'export.")
            messagebox.showerror("Erreur", f"Une erreur est survenue : {e}")

    # ==========================
    #   CLAVIER & CHRONO
    # ==========================

    arrows = {"Up": (-1, 0), "Down": (1, 0), "Left": (0, -1), "Right": (0, 1)}

    def on_key(event):
        if game.stats.paused:
            return
        key = event.keysym
        if key in arrows:
            refresh(game.move_selection(*arrows[key]))
        elif event.char and event.char in "123456789":
            on_digit(int(event.char))
        elif key in ("BackSpace", "Delete"):
            on_digit(0)
        elif key.lower() == "n":
            on_note_mode()

    app.bind("<Key>", on_key)
    app.bind("<Control-z>", lambda _e: on_undo())

    def tick():
        timer_var.set(format_elapsed(game.elapsed_seconds()))
        app.after(TIMER_TICK_MS, tick)

    on_new_game()
    tick()
    app.mainloop()


if __name__ == "__main__":
    launch_gui()
