"""Sample posts used to seed an empty store."""

from app.schemas.post import PostCreate

SAMPLE_POSTS: tuple[PostCreate, ...] = (
    PostCreate(
        title="Transforming Healthcare IT: Key Insights and Digital Innovation Strategies",
        write_date="2025-09-18",
        category="healthcare",
        author="Dr. Sarah Chen",
        author_title="Healthcare IT Director",
        read_time="5 min read",
        description=(
            "Discover the latest healthcare IT innovations and digital transformation "
            "strategies that are reshaping patient care delivery and operational efficiency "
            "in modern healthcare systems. Learn how leading organizations are implementing "
            "breakthrough solutions to improve patient outcomes and streamline operations."
        ),
        image_url="https://images.unsplash.com/photo-1576091160399-112ba8d25d1f?w=400&h=250&fit=crop",
        more_info_link="https://www.ibm.com/blog/healthcare-digital-transformation",
        tags=["healthcare", "digital-transformation", "IT", "patient-care"],
        featured=True,
    ),
    PostCreate(
        title="The Future of AI-Powered Customer Experience: Trends and Implementation",
        write_date="2025-09-15",
        category="ai",
        author="Michael Rodriguez",
        author_title="AI Research Lead",
        read_time="7 min read",
        description=(
            "Explore how artificial intelligence is revolutionizing customer experience across "
            "industries. Discover practical insights from IBM Watson implementations and learn "
            "about AI-driven solutions that deliver measurable business results and enhance "
            "customer satisfaction."
        ),
        image_url="https://images.unsplash.com/photo-1485827404703-89b55fcc595e?w=400&h=250&fit=crop",
        more_info_link="https://www.ibm.com/blog/ai-customer-experience",
        tags=["artificial-intelligence", "customer-experience", "watson", "AI"],
        featured=False,
    ),
    PostCreate(
        title="Cloud Infrastructure Modernization: Best Practices and Strategic Approaches",
        write_date="2025-09-12",
        category="cloud",
        author="Jennifer Park",
        author_title="Cloud Solutions Architect",
        read_time="8 min read",
        description=(
            "Learn best practices for modernizing legacy infrastructure using IBM Cloud "
            "solutions. Explore hybrid cloud strategies, containerization technologies, and "
            "step-by-step guidance for successful cloud transformation that drives business "
            "agility and cost optimization."
        ),
        image_url="https://images.unsplash.com/photo-1451187580459-43490279c0fa?w=400&h=250&fit=crop",
        more_info_link="https://www.ibm.com/blog/cloud-modernization",
        tags=["cloud", "infrastructure", "modernization", "containers", "hybrid-cloud"],
        featured=True,
    ),
    PostCreate(
        title="Cybersecurity in the Age of Remote Work: Protecting Your Digital Assets",
        write_date="2025-09-10",
        category="security",
        author="David Kim",
        author_title="Cybersecurity Specialist",
        read_time="6 min read",
        description=(
            "Navigate the complex cybersecurity landscape of remote work environments. Learn "
            "about advanced threat detection, zero-trust security models, and how IBM Security "
            "solutions help organizations maintain robust protection across distributed "
            "workforces."
        ),
        image_url="https://images.unsplash.com/photo-1550751827-4bd374c3f58b?w=400&h=250&fit=crop",
        more_info_link="https://www.ibm.com/blog/cybersecurity-remote-work",
        tags=["cybersecurity", "remote-work", "zero-trust", "threat-detection"],
        featured=False,
    ),
    PostCreate(
        title="Data Analytics Revolution: Unlocking Business Intelligence with IBM Watson",
        write_date="2025-09-08",
        category="data",
        author="Lisa Thompson",
        author_title="Data Science Manager",
        read_time="9 min read",
        description=(
            "Harness the power of advanced data analytics to drive informed business "
            "decisions. Explore machine learning algorithms, predictive analytics, and "
            "real-time data processing capabilities that transform raw data into actionable "
            "business intelligence."
        ),
        image_url="https://images.unsplash.com/photo-1551288049-bebda4e38f71?w=400&h=250&fit=crop",
        more_info_link="https://www.ibm.com/blog/data-analytics-watson",
        tags=["data-analytics", "machine-learning", "business-intelligence", "watson"],
        featured=True,
    ),
    PostCreate(
        title="Quantum Computing Breakthroughs: The Next Frontier in Technology",
        write_date="2025-09-05",
        category="quantum",
        author="Dr. Robert Chen",
        author_title="Quantum Research Director",
        read_time="10 min read",
        description=(
            "Discover the latest breakthroughs in quantum computing and their potential impact "
            "on industries ranging from finance to pharmaceuticals. Learn about quantum "
            "algorithms, error correction, and IBM's quantum roadmap for the next decade."
        ),
        image_url="https://images.unsplash.com/photo-1635070041078-e363dbe005cb?w=400&h=250&fit=crop",
        more_info_link="https://www.ibm.com/blog/quantum-computing",
        tags=["quantum-computing", "research", "algorithms", "technology"],
        featured=False,
    ),
)
