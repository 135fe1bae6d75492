from termvi.adapters.textual.app import main

raise SystemExit(main())
