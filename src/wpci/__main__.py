from wpci.cli import app

app()
