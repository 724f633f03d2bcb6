"""Starts the graphic monitor and the automatic player side by side."""

import subprocess
import sys

_DISPLAY = "./display"
_AI = "./ia"
_USAGE = "USAGE: ./Client [-h hote] [-n equipe] [-p port]"


def main(argv=None):
    """Launch both programs with the arguments joined into one; return 0."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if len(argv) not in (4, 6):
        print(_USAGE)
        return 0
    joined = "".join(f"{arg} " for arg in argv)
    processes = []
    for program, label in ((_DISPLAY, "Display"), (_AI, "IA")):
        try:
            processes.append(subprocess.Popen([program, joined]))
        except OSError:
            print(f"Erreur lors de la création du thread {label}", file=sys.stderr)
            return 0
    for process in processes:
        process.wait()
    return 0