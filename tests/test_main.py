from main import main


def test_main_prints_examples(capsys):
    main()
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "-x^4+3*x^2",
        "x^2-1",
        "x^2+x+1 0",
        "x^2+2*x+2",
        "49",
        "x-1",
    ]
