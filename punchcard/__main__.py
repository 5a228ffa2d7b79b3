from punchcard.main import run

run()
