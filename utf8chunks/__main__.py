from .cli import main

main(prog_name="utf8chunks")
