"""Upwork Project Catalog category taxonomy and per-category attribute sets.

Categories are three levels deep. Level 3 exists only where ``hasLevel3`` is
set. Attribute sets are keyed ``"level1|level2"`` or ``"level1|level2|level3"``.
"""

from typing import Any

CATEGORY_TAXONOMY = {
    "Admin & Customer Support": {
        "Data Entry": {"hasLevel3": False, "level3": []},
        "Ecommerce Management": {
            "hasLevel3": True,
            "level3": [
                "Product Research",
                "Product Upload",
                "Store Management",
                "Supplier & Vendor Sourcing",
                "Other Ecommerce Management"
            ]
        },
        "File Conversion": {
            "hasLevel3": True,
            "level3": [
                "Convert to a Fillable Form",
                "Convert to an Ebook",
                "Convert to an Editable File",
                "Convert to Another File"
            ]
        },
        "Flyer Distribution": {"hasLevel3": False, "level3": []},
        "Project Management": {
            "hasLevel3": True,
            "level3": [
                "Digital Marketing Projects",
                "General Project Services",
                "Graphics & Design Projects",
                "Music & Audio Projects",
                "Programming & Tech Projects",
                "Video & Animation Projects",
                "Writing & Translation Projects",
                "Other Project Management"
            ]
        },
        "Transcripts": {"hasLevel3": False, "level3": []},
        "Virtual Assistant": {
            "hasLevel3": True,
            "level3": [
                "Administration",
                "Call Center & Calling",
                "Customer Support",
                "File Conversion",
                "Research",
                "Other Virtual Assistance"
            ]
        },
        "Other Admin & Customer Support": {"hasLevel3": False, "level3": []}
    },
    "Consulting & HR": {
        "Business Consulting": {"hasLevel3": False, "level3": []},
        "Business Plans": {"hasLevel3": False, "level3": []},
        "Financial Consulting": {
            "hasLevel3": True,
            "level3": [
                "Accounting & Bookkeeping",
                "Analysis, Valuation & Optimization",
                "Financial Forecasting & Modeling",
                "Online Trading Lessons",
                "Personal Finance & Wealth Management",
                "Tax Consulting",
                "Other Financial Consulting"
            ]
        },
        "Human Resources": {
            "hasLevel3": True,
            "level3": [
                "Compensation & Benefits",
                "Employee Learning & Development",
                "HR Information Systems",
                "Organizational Development",
                "Performance Management",
                "Talent Acquisition & Recruitment",
                "Other Human Resources"
            ]
        },
        "Legal Consulting": {"hasLevel3": False, "level3": []},
        "Other Consulting & HR": {"hasLevel3": False, "level3": []}
    },
    "Design": {
        "Album Cover Design": {"hasLevel3": False, "level3": []},
        "AR Filters & Lenses": {"hasLevel3": False, "level3": []},
        "Architecture & Interior Design": {
            "hasLevel3": True,
            "level3": [
                "2D Architectural Drawings & Floor Plans",
                "3D Architectural Modeling & Rendering",
                "Diagrams & Mapping",
                "Planning & Design",
                "Virtual Staging",
                "Other Architecture & Interior Design"
            ]
        },
        "Banner Ads": {"hasLevel3": False, "level3": []},
        "Book Design": {
            "hasLevel3": True,
            "level3": ["Book Cover Design", "Book Layout Design & Typesetting", "Other Book Design"]
        },
        "Brand Style Guides": {"hasLevel3": False, "level3": []},
        "Brand Voice & Tone": {"hasLevel3": False, "level3": []},
        "Branding Services": {"hasLevel3": False, "level3": []},
        "Brochure Design": {"hasLevel3": False, "level3": []},
        "Building Information Modeling": {
            "hasLevel3": True,
            "level3": [
                "3D BIM Modeling",
                "4D Construction Simulation",
                "BIM Family Creation",
                "BIM Training & Implementation",
                "Coordination & Clash Detection",
                "Other Building Information Modeling"
            ]
        },
        "Business Cards & Stationery Design": {"hasLevel3": False, "level3": []},
        "Car Wraps": {"hasLevel3": False, "level3": []},
        "Cartoons & Comics": {"hasLevel3": False, "level3": []},
        "Catalog Design": {"hasLevel3": False, "level3": []},
        "Character Modeling": {"hasLevel3": False, "level3": []},
        "Fashion Design": {
            "hasLevel3": True,
            "level3": [
                "3D Fashion Design",
                "Fashion Illustration",
                "Full Fashion Design Process",
                "Pattern Making",
                "Technical Drawing & Tech Pack",
                "Other Fashion Design"
            ]
        },
        "Flyer Design": {"hasLevel3": False, "level3": []},
        "Game Design": {
            "hasLevel3": True,
            "level3": [
                "Backgrounds & Environments",
                "Character Design",
                "Game UI & UX",
                "Props & Objects",
                "Other Game Design"
            ]
        },
        "Graphics for Streamers": {"hasLevel3": False, "level3": []},
        "Illustration": {"hasLevel3": False, "level3": []},
        "Industrial & Product Design": {
            "hasLevel3": True,
            "level3": [
                "2D Product Drawing",
                "3D Product Modeling & Rendering",
                "Concept Development",
                "Product Manufacturing",
                "Prototyping & 3D Printing",
                "Other Industrial & Product Design"
            ]
        },
        "Infographic Design": {"hasLevel3": False, "level3": []},
        "Invitation Design": {"hasLevel3": False, "level3": []},
        "Landscape Design": {
            "hasLevel3": True,
            "level3": [
                "2D Landscape Drawings & Site Plans",
                "3D Landscape Modeling & Rendering",
                "Landscape Planning & Design",
                "Other Landscape Design"
            ]
        },
        "Local Photography": {"hasLevel3": False, "level3": []},
        "Logo Design": {"hasLevel3": False, "level3": []},
        "Menu Design": {"hasLevel3": False, "level3": []},
        "NFT Art": {"hasLevel3": False, "level3": []},
        "Packaging Design": {"hasLevel3": False, "level3": []},
        "Pattern Design": {"hasLevel3": False, "level3": []},
        "Photoshop Editing": {"hasLevel3": False, "level3": []},
        "Podcast Cover Art": {"hasLevel3": False, "level3": []},
        "Portraits & Caricatures": {"hasLevel3": False, "level3": []},
        "Postcard Design": {"hasLevel3": False, "level3": []},
        "Poster Design": {"hasLevel3": False, "level3": []},
        "Presentation Design": {"hasLevel3": False, "level3": []},
        "Product Photography": {"hasLevel3": False, "level3": []},
        "Resume Design": {"hasLevel3": False, "level3": []},
        "Signage Design": {"hasLevel3": False, "level3": []},
        "Social Media Design": {
            "hasLevel3": True,
            "level3": ["Headers & Covers", "Social Posts & Banners", "Thumbnails", "Other Social Media Design"]
        },
        "Storyboards": {"hasLevel3": False, "level3": []},
        "T-Shirts & Merchandise Design": {"hasLevel3": False, "level3": []},
        "Tattoo Design": {"hasLevel3": False, "level3": []},
        "Trade Show Booth Design": {"hasLevel3": False, "level3": []},
        "Vector Tracing": {"hasLevel3": False, "level3": []},
        "Web & Mobile Design": {
            "hasLevel3": True,
            "level3": ["Graphic UI", "Icons & Buttons", "Wireframe UX", "Other Web & Mobile Design"]
        },
        "Other Design": {"hasLevel3": False, "level3": []}
    },
    "Development & IT": {
        "AI & Machine Learning": {
            "hasLevel3": True,
            "level3": ["Chatbots", "Generative AI", "Machine Learning", "Other AI & Machine Learning"]
        },
        "Blockchain, NFT & Cryptocurrency": {
            "hasLevel3": True,
            "level3": [
                "Blockchain & NFT Development",
                "Crypto Coins & Tokens",
                "Crypto Wallet Development",
                "Other Blockchain, NFT & Cryptocurrency"
            ]
        },
        "Cybersecurity & Data Protection": {
            "hasLevel3": True,
            "level3": [
                "Assessments & Penetration Testing",
                "Cybersecurity & Data Compliance Services",
                "Cybersecurity Management",
                "Other Cybersecurity & Data Protection"
            ]
        },
        "Data Analysis & Reports": {
            "hasLevel3": True,
            "level3": [
                "Data Entry & Cleaning",
                "Data Mining & Web Scraping",
                "Data Modeling",
                "Data Visualization",
                "VBA & Macros",
                "Other Data Analysis & Reports"
            ]
        },
        "Databases": {
            "hasLevel3": True,
            "level3": ["Database Optimization & Design", "Database Queries", "Other Databases"]
        },
        "Desktop Apps": {
            "hasLevel3": True,
            "level3": ["Custom Desktop Apps", "Desktop App Improvements & Bug Fixes", "Other Desktop Apps"]
        },
        "Development for Streamers": {
            "hasLevel3": True,
            "level3": [
                "Stream Add-Ons & Customization",
                "Stream Setup & Installation",
                "Other Development for Streamers"
            ]
        },
        "Ecommerce Development": {
            "hasLevel3": True,
            "level3": [
                "Ecommerce Backup, Cloning & Migration",
                "Ecommerce Bug Fixes",
                "Ecommerce Customization",
                "Ecommerce Performance & Security",
                "Ecommerce Theme & Plugin Installation",
                "Full Ecommerce Website Creation",
                "Other Ecommerce Development"
            ]
        },
        "Game Development": {
            "hasLevel3": True,
            "level3": [
                "Full Game Creation",
                "Game Customization",
                "Game Prototyping",
                "Video Game Bug Fixes",
                "Other Game Development"
            ]
        },
        "Mobile Apps": {
            "hasLevel3": True,
            "level3": [
                "Custom Mobile Apps",
                "Mobile App Bug Fixes",
                "Mobile App Improvements",
                "Website to App Conversion",
                "Other Mobile Apps"
            ]
        },
        "Online Coding Lessons": {"hasLevel3": False, "level3": []},
        "QA Testing": {"hasLevel3": False, "level3": []},
        "Support & IT": {"hasLevel3": False, "level3": []},
        "User Testing": {"hasLevel3": False, "level3": []},
        "Web Programming": {
            "hasLevel3": True,
            "level3": [
                "Custom Website Programming",
                "Email Template Programming",
                "Landing Page Programming",
                "PSD File Conversion",
                "Scripting",
                "Web Application Programming",
                "Web Programming Bug Fixes",
                "Other Web Programming"
            ]
        },
        "Website Builders & CMS": {
            "hasLevel3": True,
            "level3": [
                "Full Website Creation",
                "Website & CMS Bug Fixes",
                "Website & CMS Customization",
                "Website Backup, Cloning & Migration",
                "Website Landing Page",
                "Website Performance & Security",
                "Website Theme & Plugin Installation",
                "Other Website Builders & CMS"
            ]
        },
        "WordPress": {
            "hasLevel3": True,
            "level3": [
                "Full WordPress Website Creation",
                "WordPress Backup, Cloning & Migration",
                "WordPress Bug Fixes",
                "WordPress Customization",
                "WordPress Installation & Theme Setup",
                "WordPress Landing Page",
                "WordPress Performance & SEO",
                "WordPress Security",
                "Other WordPress"
            ]
        },
        "Other Development & IT": {"hasLevel3": False, "level3": []}
    },
    "Lifestyle": {
        "Arts & Crafts": {"hasLevel3": False, "level3": []},
        "Career Counseling": {
            "hasLevel3": True,
            "level3": ["Career Coaching", "Interview Prep", "Job Application Assistance", "Other Career Counseling"]
        },
        "Cooking Lessons": {"hasLevel3": False, "level3": []},
        "Craft Lessons": {"hasLevel3": False, "level3": []},
        "Family & Genealogy": {"hasLevel3": False, "level3": []},
        "Gaming": {
            "hasLevel3": True,
            "level3": ["Game Coaching", "Game Sessions", "Other Gaming"]
        },
        "Online Language Lessons": {"hasLevel3": False, "level3": []},
        "Online Tutoring": {"hasLevel3": False, "level3": []},
        "Personal Styling": {"hasLevel3": False, "level3": []},
        "Personal Training": {"hasLevel3": False, "level3": []},
        "Traveling": {
            "hasLevel3": True,
            "level3": ["Local Advisors", "Trip Plans", "Other Traveling"]
        },
        "Wellness": {"hasLevel3": False, "level3": []},
        "Other Lifestyle": {"hasLevel3": False, "level3": []}
    },
    "Marketing": {
        "Book & Ebook Marketing": {"hasLevel3": False, "level3": []},
        "Community Management": {
            "hasLevel3": True,
            "level3": [
                "Growth, Partnership & Monetization",
                "Management & Engagement",
                "Planning, Strategy & Setup",
                "Sourcing & Recruitment",
                "Other Community Management"
            ]
        },
        "Content Marketing": {
            "hasLevel3": True,
            "level3": ["Content Creation", "Content Strategy & Research", "Guest Posting", "Other Content Marketing"]
        },
        "Crowdfunding": {
            "hasLevel3": True,
            "level3": ["Campaign Creation", "Campaign Marketing", "Other Crowdfunding"]
        },
        "Domain Research": {"hasLevel3": False, "level3": []},
        "Ecommerce Marketing": {
            "hasLevel3": True,
            "level3": ["Product & Storefront SEO", "Product Listings", "Other Ecommerce Marketing"]
        },
        "Email Marketing": {
            "hasLevel3": True,
            "level3": ["Email Audience Development", "Email Platform Support", "Email Templates", "Other Email Marketing"]
        },
        "Influencer Marketing": {
            "hasLevel3": True,
            "level3": ["Shoutouts & Promotion", "Strategy & Research", "Other Influencer Marketing"]
        },
        "Lead Generation": {"hasLevel3": False, "level3": []},
        "Local SEO": {
            "hasLevel3": True,
            "level3": ["Google My Business", "Local Citations & Directories", "Other Local SEO"]
        },
        "Market Research": {"hasLevel3": False, "level3": []},
        "Marketing Strategy": {"hasLevel3": False, "level3": []},
        "Mobile Marketing & Advertising": {
            "hasLevel3": True,
            "level3": ["App Store Optimization", "Mobile Ad Campaigns", "Other Mobile Marketing & Advertising"]
        },
        "Music Promotion": {
            "hasLevel3": True,
            "level3": [
                "Music Streaming Services",
                "Organic Music Promotion",
                "Paid Music Advertising",
                "Playlists & Placements",
                "Other Music Promotion"
            ]
        },
        "Podcast Marketing": {
            "hasLevel3": True,
            "level3": ["Advertising within Podcasts", "Podcast Promotion", "Other Podcast Marketing"]
        },
        "Public Relations": {
            "hasLevel3": True,
            "level3": [
                "Events, Conferences & Awards",
                "PR Strategy & Planning",
                "Press Release Distribution",
                "Other Public Relations"
            ]
        },
        "Search Engine Marketing": {
            "hasLevel3": True,
            "level3": [
                "Ad Review & Optimization",
                "Display Advertising Campaigns",
                "Product Ad Campaigns",
                "Remarketing",
                "Search Engine Marketing Management",
                "Other Search Engine Marketing"
            ]
        },
        "SEO": {
            "hasLevel3": True,
            "level3": [
                "Competitor Analysis",
                "Keyword Research",
                "Off-Page SEO",
                "On-Page SEO",
                "Technical SEO",
                "Voice Search SEO",
                "Other SEO"
            ]
        },
        "Social Media Advertising": {
            "hasLevel3": True,
            "level3": [
                "Social Media Ad Analytics & Tracking",
                "Social Media Ad Setup & Management",
                "Social Media Ad Strategy & Planning",
                "Other Social Media Advertising"
            ]
        },
        "Social Media Management": {
            "hasLevel3": True,
            "level3": [
                "Posting & Engagement",
                "Profile Setup & Integration",
                "Social Content Management",
                "Social Media Audience Research",
                "Social Media Management Analytics & Tracking",
                "Other Social Media Management"
            ]
        },
        "Surveys": {
            "hasLevel3": True,
            "level3": ["Survey Analysis", "Survey Creation", "Other Surveys"]
        },
        "Video Marketing": {
            "hasLevel3": True,
            "level3": [
                "Social Video Enhancements",
                "Video Ad Campaigns",
                "Video Marketing Audience Research",
                "Video Promotion & Distribution",
                "Video SEO",
                "Other Video Marketing"
            ]
        },
        "Web Analytics": {
            "hasLevel3": True,
            "level3": [
                "Conversion Rate Optimization",
                "Web Analytics Bug Fixes",
                "Web Analytics Setup",
                "Web Analytics Tracking & Reporting",
                "Other Web Analytics"
            ]
        },
        "Web Traffic Optimization": {"hasLevel3": False, "level3": []},
        "Other Marketing": {"hasLevel3": False, "level3": []}
    },
    "Video & Audio": {
        "3D Product Animation": {"hasLevel3": False, "level3": []},
        "Animated GIFs": {"hasLevel3": False, "level3": []},
        "Animated Whiteboard & Explainer Videos": {"hasLevel3": False, "level3": []},
        "Animation for Kids": {"hasLevel3": False, "level3": []},
        "Animation for Streamers": {"hasLevel3": False, "level3": []},
        "App & Website Promo Videos": {"hasLevel3": False, "level3": []},
        "Article to Video": {"hasLevel3": False, "level3": []},
        "Audio Ads Production": {"hasLevel3": False, "level3": []},
        "Audiobook Production": {"hasLevel3": False, "level3": []},
        "Book Trailers": {"hasLevel3": False, "level3": []},
        "Character Animation": {"hasLevel3": False, "level3": []},
        "Dialogue Editing": {
            "hasLevel3": True,
            "level3": ["Phone Systems & IVR", "Radio Ads", "Video Games", "Videos & Films", "Other Dialogue Editing"]
        },
        "DJ Drops & Producer Tags": {"hasLevel3": False, "level3": []},
        "Elearning Video Production": {"hasLevel3": False, "level3": []},
        "Game Trailers": {"hasLevel3": False, "level3": []},
        "Intro & Outro Animation": {"hasLevel3": False, "level3": []},
        "Jingles & Intros": {
            "hasLevel3": True,
            "level3": ["Intro & Outro Audio", "Jingles & Sound Bites", "Other Jingles & Intros"]
        },
        "Live Action Explainers": {"hasLevel3": False, "level3": []},
        "Logo Animation": {"hasLevel3": False, "level3": []},
        "Lyric & Music Videos": {"hasLevel3": False, "level3": []},
        "Mixing & Mastering": {"hasLevel3": False, "level3": []},
        "Music Production": {
            "hasLevel3": True,
            "level3": ["Beat Making", "Full Song Production", "Instrumentals", "Other Music Production"]
        },
        "Music Videos": {"hasLevel3": False, "level3": []},
        "Online Music Lessons": {"hasLevel3": False, "level3": []},
        "Podcast Production": {
            "hasLevel3": True,
            "level3": ["Podcast Editing", "Podcast Recording", "Podcast Show Notes", "Other Podcast Production"]
        },
        "Producers & Composers": {"hasLevel3": False, "level3": []},
        "Promo Video Production": {"hasLevel3": False, "level3": []},
        "Short Video Ads": {"hasLevel3": False, "level3": []},
        "Singers & Vocalists": {"hasLevel3": False, "level3": []},
        "Social Media Videos": {"hasLevel3": False, "level3": []},
        "Sound Design": {"hasLevel3": False, "level3": []},
        "Subtitles & Captions": {"hasLevel3": False, "level3": []},
        "Testimonial Videos": {"hasLevel3": False, "level3": []},
        "Video Editing": {"hasLevel3": False, "level3": []},
        "Visual Effects": {"hasLevel3": False, "level3": []},
        "Voice Over": {
            "hasLevel3": True,
            "level3": [
                "Animation Voice Over",
                "Audiobook Voice Over",
                "Commercial Voice Over",
                "Elearning Voice Over",
                "Narration Voice Over",
                "Podcast Voice Over",
                "Video Game Voice Over",
                "Other Voice Over"
            ]
        },
        "Other Video & Audio": {"hasLevel3": False, "level3": []}
    },
    "Writing & Translation": {
        "Ad Copy": {"hasLevel3": False, "level3": []},
        "Articles & Blog Posts": {"hasLevel3": False, "level3": []},
        "Beta Reading": {"hasLevel3": False, "level3": []},
        "Book Editing": {"hasLevel3": False, "level3": []},
        "Book Writing": {"hasLevel3": False, "level3": []},
        "Brand Voice & Tone": {"hasLevel3": False, "level3": []},
        "Case Studies": {"hasLevel3": False, "level3": []},
        "Cover Letters": {"hasLevel3": False, "level3": []},
        "Creative Writing": {"hasLevel3": False, "level3": []},
        "Email Copy": {"hasLevel3": False, "level3": []},
        "Grant Writing": {"hasLevel3": False, "level3": []},
        "Podcast Writing": {"hasLevel3": False, "level3": []},
        "Press Releases": {"hasLevel3": False, "level3": []},
        "Product Descriptions": {"hasLevel3": False, "level3": []},
        "Proofreading & Editing": {"hasLevel3": False, "level3": []},
        "Proposals": {"hasLevel3": False, "level3": []},
        "Resume Writing": {"hasLevel3": False, "level3": []},
        "Sales Copy": {"hasLevel3": False, "level3": []},
        "Script Writing": {"hasLevel3": False, "level3": []},
        "Social Media Copy": {"hasLevel3": False, "level3": []},
        "Speechwriting": {"hasLevel3": False, "level3": []},
        "Technical Writing": {"hasLevel3": False, "level3": []},
        "Translation": {
            "hasLevel3": True,
            "level3": ["General Translation", "Legal Translation", "Medical Translation", "Technical Translation", "Other Translation"]
        },
        "UX Writing": {"hasLevel3": False, "level3": []},
        "Website Copy": {"hasLevel3": False, "level3": []},
        "White Papers": {"hasLevel3": False, "level3": []},
        "Other Writing & Translation": {"hasLevel3": False, "level3": []}
    }
}


PROJECT_ATTRIBUTE_SETS = {
    "Admin & Customer Support|Data Entry": [
        {
            "name": "dataEntryType",
            "label": "Data Entry Type",
            "required": True,
            "maxItems": 6,
            "options": ["Copy Paste", "Data Cleansing", "Document Conversion", "Error Detection", "Online Research", "Word Processing"]
        },
        {
            "name": "dataEntryTool",
            "label": "Data Entry Tool",
            "required": False,
            "maxItems": 8,
            "options": ["CRM Software", "ERP Software", "Google Docs", "Google Sheets", "Medical Records Software", "Microsoft Excel", "Microsoft Office", "Microsoft Word"]
        }
    ],
    "Admin & Customer Support|Ecommerce Management|Product Research": [
        {
            "name": "industry",
            "label": "Industry",
            "required": False,
            "maxItems": 29,
            "options": [
                "Arts", "Business", "Consumer Goods", "Cryptocurrency & Blockchain", "Cybersecurity",
                "Education", "Environmental", "Ecommerce", "Financial Services/Banking", "Games",
                "Government & Public Sector", "Health & Wellness", "Hospitality & Tourism", "Insurance",
                "Kids & Family", "Legal", "Logistics & Supply Chain Management", "Manufacturing",
                "Media & Entertainment", "Medical & Pharmaceutical", "Music", "News", "Nonprofit",
                "Real Estate", "Retail & Wholesale", "Society & Culture", "Sports & Recreation",
                "Technology & Internet", "Transportation & Automotive"
            ]
        },
        {
            "name": "platform",
            "label": "Platform",
            "required": False,
            "maxItems": 3,
            "options": [
                "Alibaba", "Amazon", "Big Cartel", "BigCommerce", "eBay", "Ecwid", "Etsy",
                "Facebook Shops", "JD", "Magento", "OpenCart", "OsCommerce", "PrestaShop",
                "Shopify", "Shopware", "Squarespace", "Swell", "Volusion", "VTEX", "Webflow",
                "Wix", "WooCommerce", "Walmart", "Other"
            ]
        },
        {
            "name": "language",
            "label": "Language",
            "required": False,
            "maxItems": 1,
            "options": [
                "English", "Albanian", "Arabic", "Bengali", "Bosnian", "Bulgarian", "Catalan",
                "Chinese (Simplified)", "Chinese (Traditional)", "Croatian", "Czech", "Danish",
                "Dari", "Dutch", "Estonian", "Filipino", "Finnish", "French", "Georgian",
                "German", "Greek", "Haitian Creole", "Hawaiian", "Hebrew", "Hindi", "Hungarian",
                "Icelandic", "Indonesian", "Irish", "Italian", "Jamaican Creole", "Japanese",
                "Kazakh", "Korean", "Latin", "Latvian", "Lithuanian", "Luxembourgish", "Macedonian",
                "Malay", "Maltese", "Nepali", "Nigerian", "Norwegian", "Oriya", "Persian",
                "Polish", "Portuguese", "Punjabi", "Romanian", "Russian", "Serbian", "Slovak",
                "Slovene", "Somali", "Spanish", "Swahili", "Swedish", "Tagalog", "Tamil",
                "Thai", "Turkish", "Urdu", "Vietnamese", "Welsh", "Other"
            ]
        }
    ]
}


def level1_categories() -> list[str]:
    return list(CATEGORY_TAXONOMY)


def get_level2_categories(level1: str) -> list[str]:
    if not level1:
        return []
    return list(CATEGORY_TAXONOMY.get(level1, {}))


def has_level3(level1: str, level2: str) -> bool:
    if not level1 or not level2:
        return False
    level2_data = CATEGORY_TAXONOMY.get(level1, {}).get(level2)
    return bool(level2_data and level2_data["hasLevel3"])


def get_level3_categories(level1: str, level2: str) -> list[str]:
    if not has_level3(level1, level2):
        return []
    return list(CATEGORY_TAXONOMY[level1][level2]["level3"])


def is_known_category(level1: str, level2: str, level3: str | None = None) -> bool:
    """Check a category path against the taxonomy."""
    if level2 not in get_level2_categories(level1):
        return False
    if level3:
        return level3 in get_level3_categories(level1, level2)
    return True


def get_project_attributes(
    level1: str, level2: str, level3: str | None = None
) -> list[dict[str, Any]]:
    """Attribute definitions for a category path, empty when none are defined."""
    key = f"{level1}|{level2}|{level3}" if level3 else f"{level1}|{level2}"
    return PROJECT_ATTRIBUTE_SETS.get(key, [])


def format_taxonomy_outline() -> str:
    """Render level 1 and level 2 names as an indented outline for prompts."""
    lines: list[str] = []
    for level1 in level1_categories():
        lines.append(f"- {level1}")
        for level2 in get_level2_categories(level1):
            lines.append(f"  - {level2}")
    return "\n".join(lines)
