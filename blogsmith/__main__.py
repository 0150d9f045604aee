from blogsmith.cli import app

app()
