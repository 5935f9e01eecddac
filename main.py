from exercises_app.ui.cli import main


def run():
    return main()


if __name__ == "__main__":
    raise SystemExit(run())
