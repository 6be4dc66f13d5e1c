"""python -m buken_coaching"""

from buken_coaching.app.main import main

raise SystemExit(main())
