from laureate_trends.ui import run_app

run_app()
