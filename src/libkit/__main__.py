from libkit.cli import run

run()
