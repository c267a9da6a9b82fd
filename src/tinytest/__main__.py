from tinytest.cli import app

app(prog_name="tinytest")
