from typedconf.cli import app

app(prog_name="typedconf")
