from smoothieops.__main__ import main


def run():
    return main()


if __name__ == "__main__":
    raise SystemExit(run())
