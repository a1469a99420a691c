import sys
from pathlib import Path


sys.path.append(str(Path(__file__).resolve().parent / "src"))

from video_teacher.cli import main  # noqa: E402


if __name__ == "__main__":
    main()
