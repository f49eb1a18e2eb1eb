from solver import run_solver
import sys


def main():
    return 0 if run_solver(sys.argv[1:]) else 1


if __name__ == '__main__':
    sys.exit(main())
