from termcolor_json import ColorStream, JsonError, render


def main():
    stream = ColorStream.stdout()
    try:
        render({"string": "value", "number": 123, "bool": True, "null": None}, stream)
    except JsonError as err:
        raise SystemExit(str(err))
    stream.write("\n")


if __name__ == "__main__":
    main()
