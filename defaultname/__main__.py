from defaultname.cli import main

raise SystemExit(main())
