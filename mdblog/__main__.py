from mdblog.main import run

run()
