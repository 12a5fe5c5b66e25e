from tago.cli import main

raise SystemExit(main())
