def _continue() -> None:
    """Asks the user to continue."""
    answer = input("Continue Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting transaction!")
        exit(-1)
