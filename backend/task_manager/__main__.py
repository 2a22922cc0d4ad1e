from task_manager.main import run

run()
