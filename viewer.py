import logging
import tkinter as tk
from tkinter import filedialog, messagebox
from PIL import ImageTk
import os

import viewer_style as style
from config import Settings, default_settings
from histogram import luminance_histogram, plot_histogram_image
from image_io import IMAGE_FILETYPES, ImageLoadError, ImageSaveError, grid_to_image, load_grid, save_grid
from transforms import InvalidInput, apply_transform

logger = logging.getLogger(__name__)

OPERATION_LABELS = {
    "sharpen": "Sharpen (High-Frequency Filter)",
    "fixed": "Threshold Method 1",
    "adaptive": "Threshold Method 2",
}


class ImageViewer(tk.Frame):
    """
    Holds the originally loaded grid and the grid on display.
    Every button transforms the original, never the displayed result.
    """

    def __init__(self, master, settings: Settings = None, file_path=None):
        super().__init__(master, bg=style.BG_MAIN)
        self.master = master
        self.settings = settings or default_settings

        # === Top Toolbar ===
        toolbar = tk.Frame(self, bg=style.BG_TOOLBAR, padx=10, pady=8)
        toolbar.pack(side="top", fill="x")

        self._button(toolbar, "Load Image", self.open_image)
        for name, label in OPERATION_LABELS.items():
            self._button(toolbar, label, lambda n=name: self.run_transform(n))
        self._button(toolbar, "Save Result", self.save_result)
        self._button(toolbar, "Zoom In", self.zoom_in)
        self._button(toolbar, "Zoom Out", self.zoom_out)

        # === Parameters ===
        params = tk.Frame(self, bg=style.BG_MAIN, padx=10, pady=4)
        params.pack(side="top", fill="x")

        tk.Label(params, text="Threshold level:", font=style.FONT_TEXT,
                 bg=style.BG_MAIN, fg=style.FG_TEXT).pack(side="left")
        self.level_var = tk.StringVar(value=str(self.settings.threshold_level))
        tk.Spinbox(params, from_=0, to=255, width=5,
                   textvariable=self.level_var).pack(side="left", padx=(4, 16))

        tk.Label(params, text="Block size:", font=style.FONT_TEXT,
                 bg=style.BG_MAIN, fg=style.FG_TEXT).pack(side="left")
        self.block_var = tk.StringVar(value=str(self.settings.block_size))
        tk.Spinbox(params, from_=1, to=512, width=5,
                   textvariable=self.block_var).pack(side="left", padx=4)

        # === Main Content Layout ===
        main_frame = tk.Frame(self, bg=style.BG_MAIN)
        main_frame.pack(fill="both", expand=True, padx=10, pady=10)

        canvas_frame = tk.Frame(main_frame, bg=style.BG_MAIN)
        canvas_frame.pack(side="left", fill="both", expand=True, padx=(0, 10))

        self.canvas = tk.Canvas(canvas_frame, bg=style.BG_PANEL)
        self.canvas.pack(side="left", fill="both", expand=True)

        self.scroll_y = tk.Scrollbar(canvas_frame, orient="vertical", command=self.canvas.yview)
        self.scroll_y.pack(side="right", fill="y")
        self.scroll_x = tk.Scrollbar(main_frame, orient="horizontal", command=self.canvas.xview)
        self.scroll_x.pack(side="bottom", fill="x")
        self.canvas.configure(yscrollcommand=self.scroll_y.set, xscrollcommand=self.scroll_x.set)

        self.canvas.bind("<MouseWheel>", self.on_mousewheel)
        self.canvas.bind("<Button-4>", self.on_mousewheel_linux)
        self.canvas.bind("<Button-5>", self.on_mousewheel_linux)

        # === Histogram Panel ===
        info_frame = tk.Frame(main_frame, bg=style.BG_PANEL, bd=2,
                              relief="groove", padx=15, pady=15)
        info_frame.pack(side="right", fill="y")

        tk.Label(info_frame, text="Intensity Histogram (red)", font=style.FONT_HEADER,
                 bg=style.BG_PANEL, fg=style.FG_TEXT).pack(anchor="w", pady=(0, 5))
        self.hist_label = tk.Label(info_frame, bg=style.BG_PANEL)
        self.hist_label.pack(anchor="w")

        # === Status Line ===
        self.status = tk.Label(self, text="Load an image to begin.", anchor="w",
                               font=style.FONT_TEXT, bg=style.BG_MAIN, fg=style.FG_SUBTEXT)
        self.status.pack(side="bottom", fill="x", padx=10, pady=(0, 6))

        # === Initialize Variables ===
        self.original = None
        self.processed = None
        self.tk_img = None
        self.tk_hist = None
        self.hist_grid = None
        self.hist_level = None
        self.zoom_factor = 1.0
        self.filename = file_path
        if file_path:
            self.load_image(file_path)

    def _button(self, parent, text, command):
        tk.Button(parent, text=text, command=command,
                  bg=style.BG_BUTTON, fg=style.FG_BUTTON,
                  font=style.FONT_BUTTON, relief="flat",
                  padx=10, pady=4).pack(side="left", padx=5)

    # === File Handling ===
    def open_image(self):
        file_path = filedialog.askopenfilename(
            initialdir=self.settings.initial_dir, filetypes=IMAGE_FILETYPES
        )
        if file_path:
            self.load_image(file_path)

    def load_image(self, file_path):
        try:
            grid = load_grid(file_path)
        except ImageLoadError as e:
            messagebox.showerror("Error", f"Failed to load image\n{e}")
            return
        self.original = grid
        self.processed = grid
        self.filename = file_path
        self.zoom_factor = 1.0
        self.display_image()
        self.status.config(text=f"{os.path.basename(file_path)}: {len(grid[0])} × {len(grid)}")

    def save_result(self):
        if not self.ensure_loaded():
            return
        file_path = filedialog.asksaveasfilename(
            initialdir=self.settings.initial_dir, defaultextension=".png",
            filetypes=[("PNG", "*.png"), ("BMP", "*.bmp"), ("JPEG", "*.jpg")]
        )
        if not file_path:
            return
        try:
            save_grid(self.processed, file_path)
        except ImageSaveError as e:
            messagebox.showerror("Error", str(e))
            return
        self.status.config(text=f"Saved {os.path.basename(file_path)}")

    # === Transforms ===
    def ensure_loaded(self):
        if self.original is None:
            logger.warning("No image loaded")
            messagebox.showwarning("No image", "Load an image first.")
            return False
        return True

    def current_settings(self) -> Settings:
        """Settings with the spinbox values; non-numbers are left for the engine to reject."""
        def parse(text):
            try:
                return int(text)
            except ValueError:
                return text
        return Settings(
            threshold_level=parse(self.level_var.get()),
            block_size=parse(self.block_var.get()),
            log_level=self.settings.log_level,
            initial_dir=self.settings.initial_dir,
        )

    def run_transform(self, name):
        if not self.ensure_loaded():
            return
        try:
            self.processed = apply_transform(name, self.original, self.current_settings())
        except InvalidInput as e:
            messagebox.showerror("Invalid input", str(e))
            return
        logger.info("Applied %s", name)
        self.display_image()
        self.status.config(text=OPERATION_LABELS[name])

    # === Display & Zoom ===
    def display_image(self):
        if self.processed is None:
            return
        img = grid_to_image(self.processed)
        w = max(1, int(img.width * self.zoom_factor))
        h = max(1, int(img.height * self.zoom_factor))
        self.tk_img = ImageTk.PhotoImage(img.resize((w, h)))
        self.canvas.delete("all")
        self.canvas.create_image(0, 0, anchor="nw", image=self.tk_img)
        self.canvas.config(scrollregion=self.canvas.bbox("all"))
        self.show_histogram()

    def show_histogram(self):
        level = self.current_settings().threshold_level
        if not isinstance(level, int):
            level = None
        # zoom redraws the same grid; only replot when grid or level changed
        if self.hist_grid is self.processed and self.hist_level == level:
            return
        hist_img = plot_histogram_image(luminance_histogram(self.processed), level=level)
        self.tk_hist = ImageTk.PhotoImage(hist_img)
        self.hist_label.config(image=self.tk_hist)
        self.hist_grid = self.processed
        self.hist_level = level

    def zoom_in(self):
        self.zoom_factor *= 1.25
        self.display_image()

    def zoom_out(self):
        self.zoom_factor /= 1.25
        self.display_image()

    def on_mousewheel(self, event):
        if event.delta > 0:
            self.zoom_in()
        else:
            self.zoom_out()

    def on_mousewheel_linux(self, event):
        if event.num == 4:
            self.zoom_in()
        elif event.num == 5:
            self.zoom_out()
