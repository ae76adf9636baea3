from .core import play_game, run_script, scripted
from .io import write_csv, write_manifest

__all__ = ["play_game", "run_script", "scripted", "write_csv", "write_manifest"]
