from greatcircle.main import run

run()
