"""Tkinter widgets for the Dice Collection form."""
import logging
import tkinter as tk
from tkinter import ttk
from typing import List

from ..config import DEFAULT_BULK_ROLLS
from ..simulation import axis_ticks, bar_layout
from .state import FormState

logger = logging.getLogger(__name__)

# Chart geometry
CHART_SIZE = 600
CHART_PADDING = 60
CHART_INNER = CHART_SIZE - CHART_PADDING * 2
Y_TICKS = 10
TICK_LENGTH = 5
PADDING = 10


class DiceCollectionForm:
    """Input fields on the left, dice info in the middle, histogram on the right."""

    def __init__(self, root: tk.Tk, state: FormState):
        self.root = root
        self.state = state
        self.side_vars: List[tk.StringVar] = []

        self.root.title("Dice Collection")
        self._build()
        self.refresh()

    def _build(self):
        title = ttk.Label(self.root, text="Dice Collection", font=("Verdana", 28, "bold"), foreground="red")
        title.pack(pady=PADDING)

        buttons = ttk.Frame(self.root)
        buttons.pack(pady=PADDING)
        self.roll_once_button = ttk.Button(buttons, text="Roll Once", command=self.on_roll_once)
        self.roll_once_button.pack(side=tk.LEFT, padx=PADDING)
        self.roll_bulk_button = ttk.Button(
            buttons, text=f"Roll {self.state.rolls:,} Times", command=self.on_roll_bulk
        )
        self.roll_bulk_button.pack(side=tk.LEFT, padx=PADDING)

        main = ttk.Frame(self.root)
        main.pack(fill=tk.BOTH, expand=True, padx=PADDING * 5, pady=PADDING)

        # Inputs
        inputs = ttk.Frame(main)
        inputs.pack(side=tk.LEFT, fill=tk.Y, padx=PADDING * 2)
        ttk.Label(inputs, text="User Inputs", font=("Verdana", 17, "bold"), foreground="green").pack(pady=PADDING)
        count_row = ttk.Frame(inputs)
        count_row.pack(fill=tk.X)
        ttk.Label(count_row, text="Number of dice").pack(side=tk.LEFT, padx=(0, PADDING))
        self.count_var = tk.StringVar()
        self.count_var.trace_add("write", lambda *_: self.on_dice_count())
        ttk.Entry(count_row, textvariable=self.count_var, width=8).pack(side=tk.RIGHT)
        self.sides_frame = ttk.Frame(inputs)
        self.sides_frame.pack(fill=tk.X, pady=PADDING)
        ttk.Label(
            inputs,
            text=(
                "Due to the limit in the size of the bar graph,\n"
                f"the number of dice should be\nsmaller than {self.state.max_dice + 1} and the sides of\n"
                f"each die should be smaller than {self.state.max_sides + 1}"
            ),
        ).pack(pady=PADDING)
        self.error_label = ttk.Label(inputs, foreground="red")
        self.error_label.pack()

        # Info
        info = ttk.Frame(main)
        info.pack(side=tk.LEFT, fill=tk.Y, padx=PADDING * 2)
        ttk.Label(info, text="Info", font=("Verdana", 17, "bold"), foreground="green").pack(pady=PADDING)
        self.info_label = ttk.Label(info, font=("TkDefaultFont", 15), justify=tk.LEFT)
        self.info_label.pack()

        # Histogram
        chart = ttk.Frame(main)
        chart.pack(side=tk.RIGHT, padx=PADDING * 2)
        ttk.Label(chart, text="Histogram", font=("Verdana", 17, "bold"), foreground="green").pack(pady=PADDING)
        self.canvas = tk.Canvas(chart, width=CHART_SIZE, height=CHART_SIZE, background="darkgray", highlightthickness=0)
        self.canvas.pack()

    def on_dice_count(self):
        self.state.set_dice_count(self.count_var.get())
        for child in self.sides_frame.winfo_children():
            child.destroy()
        self.side_vars = []
        for i in range(len(self.state.sides)):
            row = ttk.Frame(self.sides_frame)
            row.pack(fill=tk.X, pady=PADDING // 2)
            ttk.Label(row, text=f"Sides of die {i + 1}").pack(side=tk.LEFT, padx=(0, PADDING))
            var = tk.StringVar()
            var.trace_add("write", lambda *_, index=i: self.on_sides(index))
            ttk.Entry(row, textvariable=var, width=8).pack(side=tk.RIGHT)
            self.side_vars.append(var)
        self.refresh()

    def on_sides(self, index: int):
        self.state.set_sides(index, self.side_vars[index].get())
        self.refresh()

    def on_roll_once(self):
        self.state.roll_once()
        self.refresh()

    def on_roll_bulk(self):
        self.root.config(cursor="watch")
        self.root.update_idletasks()
        try:
            self.state.roll_bulk()
        finally:
            self.root.config(cursor="")
        self.refresh()

    def refresh(self):
        """Redraw every section from the current state."""
        button_state = tk.NORMAL if self.state.buttons_enabled else tk.DISABLED
        self.roll_once_button.config(state=button_state)
        self.roll_bulk_button.config(state=button_state)
        self.error_label.config(text=self.state.error)
        self.info_label.config(text=self.state.info_text)
        self.draw_histogram()

    def draw_histogram(self):
        c = self.canvas
        c.delete("all")
        tracker = self.state.tracker
        if tracker is None:
            return

        left, bottom = CHART_PADDING, CHART_PADDING + CHART_INNER
        c.create_line(left, CHART_PADDING, left, bottom, fill="lightgray")
        c.create_line(left, bottom, left + CHART_INNER, bottom, fill="lightgray")

        tick_gap = CHART_INNER / Y_TICKS
        for i, label in enumerate(axis_ticks(tracker, Y_TICKS)):
            y = bottom - i * tick_gap
            c.create_line(left - TICK_LENGTH, y, left, y, fill="lightgray")
            c.create_line(left, y, left + CHART_INNER, y, fill="lightgray", dash=(2, 2))
            c.create_text(left - TICK_LENGTH - 10, y, text=str(label), anchor=tk.E, fill="lightgray")

        for bar in bar_layout(tracker, CHART_INNER, CHART_INNER):
            x = left + bar.x
            c.create_rectangle(x, bottom - bar.height, x + bar.width, bottom, fill="lightblue", outline="")
            c.create_text(x + bar.width / 2, bottom + TICK_LENGTH + 10, text=str(bar.sum_value), fill="lightgray")

        c.create_text(
            CHART_SIZE / 2, CHART_SIZE - CHART_PADDING / 3,
            text="Possible Values from Adding Dice Sides", fill="lightgray"
        )


def launch(rolls: int = DEFAULT_BULK_ROLLS):
    """Open the form and run the Tk main loop."""
    root = tk.Tk()
    DiceCollectionForm(root, FormState(rolls=rolls))
    logger.info("Dice Collection form opened")
    root.mainloop()
