from library_api.main import run

run()
