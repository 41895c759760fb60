import sys

from roaster.__main__ import main

def test_main(capsys, monkeypatch) -> None:
    monkeypatch.setattr(sys, 'argv', ['roaster'])
    main()
    out, err = capsys.readouterr()
    assert out.startswith('(function(){\nvar sc0 = new ShopController();\n')
    assert out.endswith('return sc0;\n})\n')
    assert err == ''

def test_main_primitives_verbose(capsys, monkeypatch) -> None:
    monkeypatch.setattr(sys, 'argv', ['roaster', '--primitives', '-v', '--indent', '  '])
    main()
    out, err = capsys.readouterr()
    assert out.count('(function(){') == 8
    assert '  return null;\n' in out
    assert '  return 123.23;\n' in out
    assert '  var l0 = ["foo","bar"];\n' in out
    assert 'found 12 references' in err
    assert 'javascript generation took' in err
