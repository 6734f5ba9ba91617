from task_api.main import run

run()
