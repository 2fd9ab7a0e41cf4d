from heimdall.logs import main_logger
from heimdall import configs, logs, database

def start():
	configs.load_configs()
	logs.setup()
	main_logger.info("Starting heimdall...")
	database.start()
	database.update_models()
	main_logger.info("heimdall started")

def stop():
	main_logger.info("Stopping heimdall...")
	database.stop()
	main_logger.info("heimdall stopped")
