from mdrelink.cli.main import main

raise SystemExit(main())
