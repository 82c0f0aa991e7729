from lactate_cli.main import main

raise SystemExit(main())
