from soundrouting.main import app

app(prog_name="soundrouting")
