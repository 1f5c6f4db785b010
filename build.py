import os
import subprocess
import sys
from PIL import Image

APP_NAME = "PFLetter"


def convert_icon(icon_png="resources/icon.png", icon_ico="resources/icon.ico"):
    """Convert the PNG icon to ICO for the Windows executable.
    
    Returns:
        Path to the .ico file, or None if there is no usable icon.
    """
    if not os.path.exists(icon_png):
        print("Warning: icon.png not found in resources/")
        return None
    try:
        img = Image.open(icon_png)
        img.save(icon_ico, format='ICO', sizes=[(256, 256)])
        print(f"Converted {icon_png} to {icon_ico}")
        return icon_ico
    except OSError as e:
        print(f"Warning: Could not convert icon: {e}")
        return None


def nuitka_command(icon_ico=None):
    cmd = [
        sys.executable, "-m", "nuitka",
        "--standalone",
        "--enable-plugin=pyqt6",
        "--windows-console-mode=disable",  # GUI only
        "--lto=yes",
        "--deployment",
        "--show-progress",
        "--output-dir=build",
        f"--output-filename={APP_NAME}",
        "letter.py"
    ]
    if os.path.isdir("resources"):
        cmd.insert(-1, "--include-data-dir=resources=resources")
    if icon_ico and os.path.exists(icon_ico):
        cmd.insert(-1, f"--windows-icon-from-ico={icon_ico}")
    return cmd


def build():
    print(f"Initializing {APP_NAME} Build Sequence...")
    
    print("Preparing Icon...")
    cmd = nuitka_command(convert_icon())

    print("\nExecuting Nuitka Build Command:")
    print(" ".join(cmd))
    print("\nThis process may take several minutes...")
    
    try:
        subprocess.check_call(cmd)
        print("\nBUILD SUCCESSFUL!")
        print(f"Artifacts located in: {os.path.abspath('build/letter.dist')}")
    except subprocess.CalledProcessError as e:
        print(f"\nBUILD FAILED with Code {e.returncode}")
        sys.exit(1)


if __name__ == "__main__":
    build()
