import sys

from lang_tour import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:], program=sys.argv[0]))
