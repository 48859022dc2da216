from informer.cli import main

raise SystemExit(main())
