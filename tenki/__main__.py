from tenki.cli import main

raise SystemExit(main())
