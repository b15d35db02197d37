import logging
import sys
import tkinter as tk

from config import Settings
from viewer import ImageViewer


class ImageApp(tk.Tk):
    def __init__(self, settings: Settings, file_path=None):
        super().__init__()
        self.title("Image Processing Application")
        self.geometry("800x600")

        # Menu
        menubar = tk.Menu(self)
        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Load Image", command=lambda: self.viewer.open_image())
        file_menu.add_command(label="Save Result", command=lambda: self.viewer.save_result())
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.quit)
        menubar.add_cascade(label="File", menu=file_menu)
        self.config(menu=menubar)

        self.viewer = ImageViewer(self, settings, file_path)
        self.viewer.pack(fill="both", expand=True)


def main():
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = ImageApp(settings, sys.argv[1] if len(sys.argv) > 1 else None)
    app.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
