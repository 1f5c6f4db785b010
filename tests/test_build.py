import sys
import os
import tempfile
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from PIL import Image

import build


class TestBuild(unittest.TestCase):
    def test_convert_icon(self):
        with tempfile.TemporaryDirectory() as tmp:
            png = os.path.join(tmp, "icon.png")
            ico = os.path.join(tmp, "icon.ico")
            Image.new("RGBA", (256, 256), (43, 87, 151, 255)).save(png)
            self.assertEqual(build.convert_icon(png, ico), ico)
            self.assertTrue(os.path.exists(ico))

    def test_convert_icon_missing(self):
        self.assertIsNone(build.convert_icon("does/not/exist.png", "out.ico"))

    def test_nuitka_command(self):
        cmd = build.nuitka_command()
        self.assertEqual(cmd[-1], "letter.py")
        self.assertIn("--enable-plugin=pyqt6", cmd)
        self.assertIn("--output-filename=PFLetter", cmd)
        self.assertFalse(any(c.startswith("--windows-icon-from-ico") for c in cmd))


if __name__ == "__main__":
    unittest.main()
