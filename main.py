from ladder import run_ladder
import multiprocessing
import sys

if __name__ == '__main__':
    multiprocessing.freeze_support()
    sys.exit(run_ladder(sys.argv[1:]))
