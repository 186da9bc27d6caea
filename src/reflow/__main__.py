from reflow.cli import start


start()
