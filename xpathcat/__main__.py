from xpathcat.main import run

run()
