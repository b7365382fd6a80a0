from interview.cli.main import app

app()
