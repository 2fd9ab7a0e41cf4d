import sys

import heimdall


def main() -> int:
	# Создает недостающие таблицы в настроенной БД и завершается
	heimdall.start()
	heimdall.stop()
	return 0

if __name__ == "__main__":
	sys.exit(main())
