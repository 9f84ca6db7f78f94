from tessel.cli import main

raise SystemExit(main())
