"""
Interfaz gráfica de la calculadora.

Usa tkinter. Cada pulsación se despacha al motor en el mismo hilo de la
interfaz y la pantalla se vuelve a dibujar a partir de los dos textos
observables del motor (expresión y resultado).
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine
from keypad import KEYPAD, dispatch

logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":           "#FFFFFF",
        "num":          "#EEEEEE",
        "num_fg":       "#000000",
        "op":           "#64B5F6",
        "op_fg":        "#FFFFFF",
        "equals":       "#64B5F6",
        "equals_fg":    "#FFFFFF",
        "expr_fg":      "#000000",
        "expr_done_fg": "#808080",
        "result_fg":    "#2E7D32",
    }

    EXPRESSION_LIFT = 15    # píxeles que sube la expresión con resultado

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])

        self.engine = engine if engine is not None else CalculatorEngine()

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()
        self._refresh()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_expr   = tkfont.Font(family="Segoe UI", size=28, weight="bold")
        self._f_result = tkfont.Font(family="Segoe UI", size=42, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=18)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["bg"], padx=16, pady=16)
        frame.pack(fill="both", expand=True)

        # Anclado abajo a la derecha, como en la pantalla original
        self.expr_var = tk.StringVar()
        self.result_var = tk.StringVar()

        self.result_label = tk.Label(
            frame, textvariable=self.result_var, font=self._f_result,
            bg=self.C["bg"], fg=self.C["result_fg"], anchor="e",
        )
        self.result_label.pack(side="bottom", fill="x")

        self.expr_label = tk.Label(
            frame, textvariable=self.expr_var, font=self._f_expr,
            bg=self.C["bg"], fg=self.C["expr_fg"], anchor="e",
        )
        self.expr_label.pack(side="bottom", fill="x")

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(KEYPAD):
            # Filas cortas (el "=") ocupan todo el ancho
            span = max_cols // len(row_def)
            for idx, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C[kind], relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=idx * span, columnspan=span,
                         sticky="nsew", padx=4, pady=4, ipady=10)
            frame.rowconfigure(r, weight=1)

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Return>", lambda _e: self._on_key("equals"))
        self.root.bind("<KP_Enter>", lambda _e: self._on_key("equals"))
        self.root.bind("<Escape>", lambda _e: self._on_key("clear"))

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        dispatch(self.engine, action)
        logger.debug("%s -> expresión=%r resultado=%r", action,
                     self.engine.expression, self.engine.result)
        self._refresh()

    def _refresh(self):
        expression = self.engine.expression
        result = self.engine.result

        self.expr_var.set(expression)
        self.result_var.set(result)

        if result:
            self.expr_label.config(fg=self.C["expr_done_fg"])
            self.expr_label.pack_configure(pady=(0, self.EXPRESSION_LIFT))
        else:
            self.expr_label.config(fg=self.C["expr_fg"])
            self.expr_label.pack_configure(pady=0)
