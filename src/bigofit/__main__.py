from bigofit.cli import main

raise SystemExit(main())
